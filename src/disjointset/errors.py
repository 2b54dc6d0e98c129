"""Exception hierarchy for disjointset.

Every error is a programming-contract violation raised synchronously at
the call that received the bad input. Each class also derives from the
closest built-in exception so callers can catch either.
"""

from typing import Any

__all__ = [
    "DisjointSetError",
    "NullElementError",
    "ElementNotFoundError",
    "InvalidConfigurationError",
    "EdgeFormatError",
]


class DisjointSetError(Exception):
    """Base class for all disjointset errors."""


class NullElementError(DisjointSetError, TypeError):
    """Raised when a required element argument is None."""

    def __init__(self, name: str) -> None:
        """Initialize null element error.

        Parameters
        ----------
        name : str
            Name of the argument that was None.
        """
        super().__init__(f"{name} must not be None")
        self.name = name


class ElementNotFoundError(DisjointSetError, KeyError):
    """Raised when an element was never registered with make_set."""

    def __init__(self, element: Any) -> None:
        """Initialize element-not-found error.

        Parameters
        ----------
        element : Any
            The unregistered element.
        """
        super().__init__(element)
        self.element = element

    def __str__(self) -> str:
        return f"Element not found in the disjoint set: {self.element!r}"


class InvalidConfigurationError(DisjointSetError, ValueError):
    """Raised when a container or strategy is configured with invalid inputs."""


class EdgeFormatError(DisjointSetError, ValueError):
    """Raised when an edge record cannot be parsed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        """Initialize edge format error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number in the source file, if known.
        """
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
