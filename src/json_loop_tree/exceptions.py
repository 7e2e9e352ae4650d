"""ConfigurationError: the single error kind raised for malformed tree input.

Every structural violation found while walking a JSON node tree is reported
as a ``ConfigurationError`` carrying the dotted path of the offending node
and a short message.  The rendered form is ``"[<path>] <message>"``; a
violation at the root renders as ``"[] <message>"``.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["ConfigurationError", "format_path"]

PATH_SEPARATOR = "."


def format_path(names: Sequence[str]) -> str:
    """Join ancestor names outermost-first into a dotted path.

    Args:
        names: Node names from the root down to the current node.

    Returns:
        The dot-joined path, or "" for an empty sequence.
    """
    return PATH_SEPARATOR.join(names)


class ConfigurationError(ValueError):
    """Raised when a JSON node tree violates the expected shape.

    Attributes:
        path:    Dotted path of node names at the point of detection.
        message: Description of the violation, e.g. "node without name".
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"[{path}] {message}")

    @classmethod
    def at(cls, names: Sequence[str], message: str) -> ConfigurationError:
        """Build an error located at the given sequence of ancestor names."""
        return cls(format_path(names), message)

    def __reduce__(self) -> tuple[type[ConfigurationError], tuple[str, str]]:
        return (type(self), (self.path, self.message))
