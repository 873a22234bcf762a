"""
READMIN Exceptions

Errors raised while deriving names and resolving controllers.
Nothing here is recovered locally; callers decide what to do.
"""


class ReadminError(Exception):
    """Base class for all READMIN errors."""


class ControllerNotFoundError(ReadminError, LookupError):
    """
    Raised when a qualified controller name does not resolve to a
    registered controller class.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Controller not found: {name}")


class InvalidActionError(ReadminError, ValueError):
    """Raised when a member or collection action uses an unsupported HTTP verb."""


__all__ = [
    "ReadminError",
    "ControllerNotFoundError",
    "InvalidActionError",
]
