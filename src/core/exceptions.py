"""Exceptions raised by the client core. Local rejections (wrong turn, illegal square, ...) are NOT exceptions."""


class GameError(Exception):
    """Base class for all errors raised by this package."""


class InvalidMessageError(GameError):
    """An inbound payload from the server could not be interpreted."""
