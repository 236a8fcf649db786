"""Bootstrap - wires settings into logging and hands out the service facades.

Invariants:
    - configure() is safe to call more than once (logging handler is replaced, not stacked)
    - Importing this module has no side effects
"""

import logging

from storefront.config import Settings, get_settings
from storefront.infrastructure.observability import setup_logging
from storefront.services.order_service import OrderService
from storefront.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


def configure(settings: Settings | None = None) -> tuple[OrderService, ProfileService]:
    """Set up logging from settings and return (OrderService, ProfileService)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.debug(
        "Storefront configured (level=%s, format=%s)",
        settings.log_level, settings.log_format,
    )
    return OrderService(), ProfileService()
