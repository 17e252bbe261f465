"""
cellblock: a two-player light-cycle board game for the terminal.

Components:
- grid: cell states, positions and the NxN board
- notation/move_validator: token parsing ("A7") and move legality
- referee: the game state machine (turns, blocking, outcome)
- console: rich table rendering and line input behind a Presenter seam
- game: the turn loop (GameRunner) and GameConfig
"""
# Package exports are intentionally minimal; import modules directly as needed.
