from typing import Protocol


class DocumentUnavailable(Exception):
    """A requested document could not be read or converted."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        self.reason = reason
        message = f"document {name!r} unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentSource(Protocol):
    def load(self, name: str) -> str:
        """Return the raw text of the named document.
        Raises DocumentUnavailable when it cannot be read.
        """


class MarkupConverter(Protocol):
    def convert(self, text: str) -> str:
        ...
