"""HTTP app for the even server.

Routes:
  - GET /      plain-text greeting, independent of any /info history
  - GET /info  JSON record; shape alternates on every call (see state.CounterStore)

Unexpected exceptions inside a handler never escape as framework 500 pages; the
exception guard logs them and returns a stable JSON error body instead.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import ServerSettings
from .errors import error_from_exception
from .state import CounterStore


log = logging.getLogger("even_server.server")

COUNTER_HEADER = "X-Even-Counter"
VARIANT_HEADER = "X-Even-Variant"


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build the app. Without explicit settings they are read from EVEN_* variables."""

    settings = settings if settings is not None else ServerSettings.from_env()

    app = FastAPI(
        title="Even Server",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Per-app state; handlers read it through request.app.state.
    app.state.settings = settings  # type: ignore[attr-defined]
    app.state.store = CounterStore(settings.initial_count)  # type: ignore[attr-defined]

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        try:
            response: Response = await call_next(request)
            return response
        except Exception as exc:  # noqa: BLE001
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(error_from_exception(exc), status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    async def root(request: Request):
        return PlainTextResponse(request.app.state.settings.greeting)

    @app.get("/info")
    async def info(request: Request):
        store: CounterStore = request.app.state.store
        record, counter = store.advance()

        log.info("info: sending %s record (optional field present: %s)", record.kind, record.kind == "extended")

        response = JSONResponse(record.to_dict(), status_code=200)
        if request.app.state.settings.debug:
            response.headers[COUNTER_HEADER] = str(counter)
            response.headers[VARIANT_HEADER] = record.kind
        return response

    return app

