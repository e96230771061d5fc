import os
from pathlib import Path

import markdown

from .interfaces import DocumentSource, DocumentUnavailable, MarkupConverter

DEFAULT_EXTENSIONS = ("fenced_code", "tables")


def extensions_from_env() -> list[str]:
    raw = os.getenv("MARKDOWN_EXTENSIONS", ",".join(DEFAULT_EXTENSIONS))
    return [ext.strip() for ext in raw.split(",") if ext.strip()]


class LocalDocumentSource(DocumentSource):
    def __init__(self, docs_dir: str) -> None:
        self._base = Path(docs_dir).resolve()

    @property
    def base_dir(self) -> Path:
        return self._base

    def path_for(self, name: str) -> Path:
        """Resolve a document name against the base directory.

        Names that resolve outside the base directory (``..`` segments,
        absolute paths, symlinks pointing elsewhere) are rejected.
        """
        p = (self._base / name).resolve()
        if not p.is_relative_to(self._base):
            raise DocumentUnavailable(name, "outside documents directory")
        return p

    def load(self, name: str) -> str:
        # resolve() raises RuntimeError on symlink loops and ValueError on NUL bytes.
        try:
            p = self.path_for(name)
            with p.open("r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError, ValueError, RuntimeError) as e:
            raise DocumentUnavailable(name, str(e)) from e


class MarkdownConverter(MarkupConverter):
    def __init__(self, extensions: list[str] | None = None) -> None:
        self._extensions = list(DEFAULT_EXTENSIONS if extensions is None else extensions)

    @property
    def extensions(self) -> list[str]:
        return list(self._extensions)

    def convert(self, text: str) -> str:
        # markdown.markdown builds a fresh Markdown instance per call, so no
        # parser state leaks between documents.
        return markdown.markdown(text, extensions=self._extensions)
