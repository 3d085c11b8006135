"""Process startup for the userhub core.

Transport layers call configure_application() once at startup, then build
services and buses per session through ``users.bootstrap``.
"""

from __future__ import annotations

import structlog

from infrastructure.logging import configure_logging
from infrastructure.settings import Settings, get_settings
from users.bootstrap import configure_password_hashing


def configure_application(settings: Settings | None = None) -> Settings:
    """Apply logging and password hashing configuration.

    Args:
        settings: Settings to apply; loaded from the environment when omitted

    Returns:
        The settings that were applied
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    configure_password_hashing(settings.security)

    structlog.get_logger().info(
        "application_configured",
        app_name=settings.app_name,
        debug=settings.debug,
        database=settings.database.connection_string,
        bcrypt_rounds=settings.security.bcrypt_rounds,
    )
    return settings
