from quoridor_fences.config.board_config import BoardConfig, MAX_GRID_TABLE_CELLS, load_board_config

__all__ = [
    "BoardConfig",
    "MAX_GRID_TABLE_CELLS",
    "load_board_config",
]
