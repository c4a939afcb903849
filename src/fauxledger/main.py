"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from fauxledger import __version__
from fauxledger.client import FauxLedgerClient
from fauxledger.config import Settings, get_settings
from fauxledger.interfaces.api.app import create_app


def main() -> None:
    """CLI entry point."""
    print(f"FauxLedger v{__version__}")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_fauxledger_app(settings: Settings | None = None) -> App:
    """Composition root - build the seeded client and the Falcon app around it."""
    settings = settings or get_settings()
    configure_logging(settings)

    client = FauxLedgerClient(settings)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(client, cors_origins)


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_fauxledger_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
