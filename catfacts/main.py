import logging
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import Settings, load_settings
from .routes import facts_router, greeting_router
from .service import FactService, HttpFactService

logger = logging.getLogger(__name__)


def create_app(
    fact_service: Optional[FactService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build a fresh app wired to ``fact_service``.

    Without an explicit service, an ``HttpFactService`` pointing at the
    configured upstream URL is used. Settings are only read in that case.
    """
    if fact_service is None:
        settings = settings or load_settings()
        fact_service = HttpFactService(settings.api_url, timeout=settings.timeout)
        logger.info("Using upstream fact API at %s", settings.api_url)

    app = FastAPI(title="Cat Facts API", version=__version__)
    app.state.fact_service = fact_service
    app.include_router(greeting_router)
    app.include_router(facts_router)
    return app
