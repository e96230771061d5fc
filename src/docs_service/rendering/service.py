import logging

from .interfaces import DocumentSource, DocumentUnavailable, MarkupConverter

logger = logging.getLogger(__name__)

PAGE_TITLE = "API REST - Documentación"
ERROR_MESSAGE = "Error al cargar la documentación"

PAGE_STYLE = """\
      body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif;
        line-height: 1.6;
        max-width: 900px;
        margin: 0 auto;
        padding: 2rem;
        color: #333;
      }
      pre {
        background: #f6f8fa;
        padding: 1rem;
        border-radius: 6px;
        overflow-x: auto;
      }
      code {
        font-family: 'Consolas', 'Monaco', monospace;
      }
      h1, h2, h3 {
        margin-top: 2rem;
        margin-bottom: 1rem;
      }
"""


def render_template(fragment: str) -> str:
    """Embed an HTML fragment into the fixed documentation page."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        '    <meta charset="utf-8">\n'
        f"    <title>{PAGE_TITLE}</title>\n"
        "    <style>\n"
        f"{PAGE_STYLE}"
        "    </style>\n"
        "  </head>\n"
        "  <body>\n"
        f"{fragment}\n"
        "  </body>\n"
        "</html>\n"
    )


class DocumentService:
    """Core domain service rendering Markdown documents into HTML pages.

    This service is framework-agnostic. Every call reads the document
    fresh through the source gateway; nothing is cached between calls.
    """

    def __init__(self, source: DocumentSource, converter: MarkupConverter) -> None:
        self._source = source
        self._converter = converter

    def render_page(self, file_name: str) -> str:
        """Render a document, raising DocumentUnavailable on any failure."""
        try:
            text = self._source.load(file_name)
        except DocumentUnavailable:
            raise
        except Exception as e:
            raise DocumentUnavailable(file_name, f"read failed: {e}") from e
        try:
            fragment = self._converter.convert(text)
        except Exception as e:
            raise DocumentUnavailable(file_name, f"conversion failed: {e}") from e
        logger.debug("rendered %s (%d chars of markdown)", file_name, len(text))
        return render_template(fragment)

    def render(self, file_name: str) -> str:
        """Render a document, returning ERROR_MESSAGE instead of raising."""
        try:
            return self.render_page(file_name)
        except DocumentUnavailable as e:
            logger.warning("%s", e)
            return ERROR_MESSAGE
