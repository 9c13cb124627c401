import logging

from userauth.api.v1.routers import auth
from userauth.core.config import settings

logger = logging.getLogger(__name__)


def bootstrap_app(app):
    prefix = settings.API_PREFIX

    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    logger.info(f"Routers registered under '{prefix or '/'}'.")
