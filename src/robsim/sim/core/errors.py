from __future__ import annotations

from typing import Optional


class ConfigError(ValueError):
    """Raised when simulation parameters cannot be turned into a configuration."""


class IncorrectData(ConfigError):
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is None:
            super().__init__(message)
        else:
            super().__init__(f"Line {line}. {message}")


class MissingParameter(ConfigError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not all parameters were read, missing: {name}.")


class BoardError(ValueError):
    """Raised when a board description does not describe a valid grid."""


class UnknownCharacterOnBoard(BoardError):
    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Unknown character on board: {character!r}.")


class UnevenRows(BoardError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Line {line}. Board rows are not of equal length.")


class EmptyBoard(BoardError):
    def __init__(self) -> None:
        super().__init__("Board has no cells.")
