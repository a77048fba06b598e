"""Main web application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from licitax_advisor.providers.firestore import FirestoreProvider
from licitax_advisor.providers.logging import LoggingProvider
from licitax_advisor.web.errors import register_error_handlers
from licitax_advisor.web.routers import bids, clients, debts, documents, queries, settings
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

CORRELATION_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initializes the document store once, before the first request.

    A failed initialization does not stop the application: the
    store-backed endpoints answer 503 until the process is restarted with
    valid credentials.

    Args:
        app: The application.

    Yields:
        None.
    """
    status = FirestoreProvider.initialize()
    logger = LoggingProvider().get_logger()
    if status.ready:
        logger.info(f"Firestore ready ({status.credential_source}).")
    else:
        logger.error(f"Firestore unavailable: {status.error}")
    yield


app = FastAPI(title="Licitax Advisor", lifespan=lifespan)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")
register_error_handlers(app)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tags every log line of a request with its correlation id.

    The id is taken from the `X-Request-ID` header, or generated, and is
    echoed back in the response.

    Args:
        request: The incoming request.
        call_next: The rest of the application.

    Returns:
        The response, carrying the correlation id header.
    """
    correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
    with LoggingProvider().set_correlation_id(correlation_id):
        response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


app.include_router(clients.router)
app.include_router(bids.router)
app.include_router(documents.router)
app.include_router(debts.router)
app.include_router(settings.router)
app.include_router(queries.router)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status dictionary, including whether the document store is available.
    """
    return {"status": "ok", "store": "ready" if FirestoreProvider.is_ready() else "unavailable"}
