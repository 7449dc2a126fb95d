"""Error type raised for invalid scene files and runtime failures."""

from __future__ import annotations


class CubError(Exception):
    """A fatal problem with a scene description or the game state."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def format_error(message: str) -> str:
    """Return the text printed to the user when the program stops on an error."""
    return f"Error\n{message}\n"