# core/config_validator.py

from typing import List
from core.config import settings, INSECURE_JWT_SECRET
from core.logging_config import logger


def validate_required_config() -> List[str]:
    """
    Validate values the service cannot run without.
    Returns list of invalid settings.
    """
    invalid = []

    if not settings.JWT_SECRET_KEY:
        invalid.append("JWT_SECRET_KEY")
    if settings.REDIRECT_LOOP_MAX < 1:
        invalid.append("REDIRECT_LOOP_MAX (must be >= 1)")
    if settings.REDIRECT_LOOP_WINDOW_MS <= 0:
        invalid.append("REDIRECT_LOOP_WINDOW_MS (must be > 0)")
    if not settings.LOGIN_ROUTE.startswith("/"):
        invalid.append("LOGIN_ROUTE (must start with '/')")

    return invalid


def validate_optional_config() -> List[str]:
    """
    Validate recommended configuration.
    Returns list of warnings.
    """
    warnings = []

    if settings.JWT_SECRET_KEY == INSECURE_JWT_SECRET:
        if settings.ENV == "production":
            warnings.append("JWT_SECRET_KEY is the development default in production")
        else:
            warnings.append("JWT_SECRET_KEY (using development default)")

    return warnings


def validate_config_on_startup():
    """
    Validate configuration on application startup.
    Raises RuntimeError if critical config is invalid.
    Logs warnings for optional config.
    """
    invalid_required = validate_required_config()
    missing_optional = validate_optional_config()

    if invalid_required:
        error_msg = f"Invalid required configuration: {', '.join(invalid_required)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
