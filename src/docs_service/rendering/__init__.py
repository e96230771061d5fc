"""
Domain layer for document rendering.
Provides interfaces (gateways) and a service that turns a named Markdown
document into a complete HTML page, abstracting file access and the
Markdown library so front-ends (HTTP or others) share the same core logic.
"""

from .interfaces import DocumentSource, DocumentUnavailable, MarkupConverter
from .service import ERROR_MESSAGE, PAGE_TITLE, DocumentService, render_template
