"""Commands that run the REST API."""

import click
import uvicorn
from licitax_advisor.providers.config import ConfigProvider
from licitax_advisor.providers.logging import LoggingProvider

APP_PATH = "licitax_advisor.web.main:app"


@click.group(name="web")
def web_group() -> None:
    """Manage the REST API server."""
    pass


@web_group.command(name="serve")
@click.option("--host", default="127.0.0.1", help="Host to bind to.")
@click.option("--port", default=8000, help="Port to bind to.")
@click.option("--reload", is_flag=True, help="Enable auto-reload.")
@click.option("--workers", default=1, type=click.IntRange(min=1), help="Number of worker processes.")
def serve(host: str, port: int, reload: bool, workers: int) -> None:
    """Start the API server.

    Each worker process initializes its own Firestore client on startup.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        reload: Enable auto-reload.
        workers: Number of worker processes.
    """
    if reload and workers > 1:
        raise click.UsageError("--reload cannot be combined with more than one worker.")

    config = ConfigProvider.get_config()
    logger = LoggingProvider().get_logger()
    target = "emulator at " + config.GCP_FIRESTORE_HOST if config.GCP_FIRESTORE_HOST else "Firestore"
    logger.info(f"Serving the API on {host}:{port} with {workers} worker(s), backed by {target}.")

    options: dict = {"host": host, "port": port, "reload": reload, "log_level": "info"}
    if workers > 1:
        options["workers"] = workers
    uvicorn.run(APP_PATH, **options)
