"""Exceptions raised by the session layer.

The tree engine itself never raises for a missing value; these cover
malformed commands and invalid session state.
"""


class BSTPlaygroundError(Exception):
    """Base exception for playground errors."""
    pass


class NoTreeSelectedError(BSTPlaygroundError):
    """Raised when a tree command runs with no current tree."""

    def __init__(self, message: str = "No tree selected! Use 'use <name>' first."):
        super().__init__(message)


class TreeExistsError(BSTPlaygroundError):
    """Raised when creating a tree under a name already in use."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tree '{name}' already exists!")


class TreeNotFoundError(BSTPlaygroundError):
    """Raised when a named tree is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tree '{name}' not found!")


class CommandUsageError(BSTPlaygroundError):
    """Raised when a command is missing arguments or has too many."""

    def __init__(self, command: str, usage: str):
        self.command = command
        self.usage = usage
        super().__init__(f"Usage: {usage}")


class ValueParseError(BSTPlaygroundError):
    """Raised when a token cannot be parsed as the session's element type."""

    def __init__(self, token: str, type_name: str):
        self.token = token
        self.type_name = type_name
        super().__init__(f"Invalid value '{token}' for type {type_name}")


class UnknownCommandError(BSTPlaygroundError):
    """Raised for a command word the dispatcher does not know."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(
            f"Unknown command: '{action}'. Type 'help' for available commands."
        )
