from .stdin_level_input import StdinLevelInput

__all__ = [
    "StdinLevelInput",
]
