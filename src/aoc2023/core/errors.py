"""Errors raised by the puzzle parsers and solvers."""


class InvalidInput(ValueError):
    """Raised when a puzzle input cannot be solved."""

    pass


class ParseError(InvalidInput):
    """Raised when the input does not follow the day's grammar."""

    pass


class DomainError(InvalidInput):
    """Raised when well-formed input violates a puzzle rule."""

    pass
