"""TokenVest - Main application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tokenvest.api.dependencies import get_ledger
from tokenvest.api.error_handlers import register_error_handlers
from tokenvest.api.routes import health, investments, registry, stats, token
from tokenvest.config import get_settings
from tokenvest.config.logging import configure_logging, get_logger
from tokenvest.core.exceptions import ConfigurationError
from tokenvest.core.identity import Address, is_valid_address
from tokenvest.host.ledger import LocalLedger

log = get_logger(__name__)


def bootstrap_registry(ledger: LocalLedger, admin: str | None) -> bool:
    """Initialize the registry with admin if it has never been initialized.

    Args:
        ledger: Ledger hosting the registry.
        admin: Configured admin address, or None to skip bootstrap.

    Returns:
        True if init ran, False otherwise.

    Raises:
        ConfigurationError: If admin is set but not a valid address.
    """
    if admin is None:
        return False

    if not is_valid_address(admin):
        raise ConfigurationError("REGISTRY_ADMIN is not a valid address")

    if ledger.invoke(lambda r: r.state.get_admin()) is not None:
        log.info("registry_bootstrap_skipped_initialized")
        return False

    ledger.invoke(lambda r: r.init(Address(admin)))
    log.info("registry_bootstrapped")
    return True


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle.

    On startup: configure logging, open the ledger and bootstrap the
    registry admin when configured.
    """
    configure_logging()
    settings = get_settings()

    ledger = get_ledger()
    bootstrap_registry(ledger, settings.registry_admin)
    log.info("startup_complete", store_backend=settings.store_backend)

    yield

    log.info("shutdown_complete")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Investment registry for tokenized real-world assets",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_error_handlers(application)

    # Register API routes
    application.include_router(health.router, prefix="/api")
    application.include_router(registry.router, prefix="/api")
    application.include_router(token.router, prefix="/api")
    application.include_router(investments.router, prefix="/api")
    application.include_router(stats.router, prefix="/api")

    return application


# Create the app instance
app = create_app()


def main() -> None:
    """Run the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tokenvest.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
