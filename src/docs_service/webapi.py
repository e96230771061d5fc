import asyncio
import logging
import os

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse

try:
    from docs_service import __version__
    from docs_service.rendering import DocumentService
    from docs_service.rendering.adapters import LocalDocumentSource, MarkdownConverter, extensions_from_env
except ImportError:
    # Allow running as a script: `python src/docs_service/webapi.py`
    import sys as _sys
    from pathlib import Path as _Path
    _sys.path.append(str(_Path(__file__).resolve().parents[1]))  # add ./src to sys.path
    from docs_service import __version__
    from docs_service.rendering import DocumentService
    from docs_service.rendering.adapters import LocalDocumentSource, MarkdownConverter, extensions_from_env

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Documentation Service",
    version=os.getenv("DOCS_SERVICE_VERSION", __version__),
    description=(
        "Serves the project's Markdown documentation (README.md and GUIA.md) "
        "rendered as HTML pages."
    ),
)

README_FILE = "README.md"
GUIDE_FILE = "GUIA.md"
GREETING = "¡Hola Mundo!"

_PAGE_EXAMPLE = "<!DOCTYPE html><html><head><title>API REST - Documentación</title>...</html>"

SERVICE: DocumentService | None = None


def build_service(docs_dir: str | None = None, extensions: list[str] | None = None) -> DocumentService:
    """Wire the local document source and Markdown converter.

    The documents directory defaults to DOCS_DIR (or "."), resolved once here
    so later changes of the process working directory have no effect.
    """
    if docs_dir is None:
        docs_dir = os.getenv("DOCS_DIR", ".")
    if extensions is None:
        extensions = extensions_from_env()
    source = LocalDocumentSource(docs_dir)
    converter = MarkdownConverter(extensions)
    logger.info("serving documents from %s", source.base_dir)
    return DocumentService(source=source, converter=converter)


def get_service() -> DocumentService:
    global SERVICE
    if SERVICE is None:
        SERVICE = build_service()
    return SERVICE


def _html_responses(description: str) -> dict[int | str, dict[str, object]]:
    return {
        200: {
            "description": description,
            "content": {"text/html": {"example": _PAGE_EXAMPLE}},
        }
    }


@app.get("/health")
def health() -> dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get(
    "/",
    response_class=HTMLResponse,
    tags=["Documentación"],
    summary="Obtener la documentación principal del proyecto",
    description=(
        "Retorna una página HTML generada dinámicamente a partir del README.md del proyecto. "
        "La página incluye estilos CSS para una mejor presentación y el contenido markdown es convertido a HTML."
    ),
    responses=_html_responses("Página HTML con la documentación del proyecto"),
)
async def get_documentation(service: DocumentService = Depends(get_service)) -> HTMLResponse:
    # Render is blocking file I/O; run it off the event loop.
    content = await asyncio.to_thread(service.render, README_FILE)
    return HTMLResponse(content=content)


@app.get(
    "/guia",
    response_class=HTMLResponse,
    tags=["Documentación"],
    summary="Obtener la guía detallada del proyecto",
    description=(
        "Retorna una página HTML generada dinámicamente a partir del GUIA.md del proyecto. "
        "Contiene información detallada sobre la estructura y desarrollo del proyecto."
    ),
    responses=_html_responses("Página HTML con la guía detallada del proyecto"),
)
async def get_guide(service: DocumentService = Depends(get_service)) -> HTMLResponse:
    content = await asyncio.to_thread(service.render, GUIDE_FILE)
    return HTMLResponse(content=content)


@app.get(
    "/saludo",
    response_class=PlainTextResponse,
    tags=["Saludo"],
    summary="Obtener saludo",
    responses={200: {"description": "Retorna un mensaje de saludo"}},
)
def get_greeting() -> PlainTextResponse:
    return PlainTextResponse(content=GREETING)


def python_log_level(name: str) -> int:
    """Map a uvicorn log level name to a stdlib logging level.

    uvicorn's "trace" has no stdlib counterpart and maps to DEBUG; unknown
    names fall back to INFO.
    """
    name = name.strip().lower()
    if name == "trace":
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def run() -> None:
    """Run a development ASGI server using uvicorn.

    Exposes the app at host:port (default 0.0.0.0:8080). Set PORT env var to override.
    """
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    # Enable reload in dev unless explicitly disabled
    reload = os.getenv("RELOAD", "true").lower() in {"1", "true", "yes", "on"}
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logging.basicConfig(level=python_log_level(log_level), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("docs_service.webapi:app", host=host, port=port, reload=reload, log_level=log_level)


if __name__ == "__main__":
    run()
