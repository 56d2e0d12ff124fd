"""A compact chess engine with tree search, a console game and stored move history."""

__version__ = "0.1.2"
__all__ = [
    "board",
    "board_controller",
    "cli",
    "database",
    "figure",
    "figure_list",
    "movement",
    "point",
    "score",
]