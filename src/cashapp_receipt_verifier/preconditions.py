"""Gate that runs before any network work."""

import structlog

from .errors import MISSING_REFERENCE_MESSAGE, MISSING_USERNAME_MESSAGE, MissingFieldError
from .models import VerificationRequest

logger = structlog.get_logger(__name__)


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def check_required_fields(request: VerificationRequest) -> None:
    """
    Ensure the declared username and expected reference are present.

    The username is checked first, so it wins when both are missing.

    Raises:
        MissingFieldError: If either field is empty or whitespace only
    """
    if _is_blank(request.username):
        logger.info("Verification rejected", reason="missing_username")
        raise MissingFieldError(MISSING_USERNAME_MESSAGE, field="username")

    if _is_blank(request.reference):
        logger.info("Verification rejected", reason="missing_reference")
        raise MissingFieldError(MISSING_REFERENCE_MESSAGE, field="reference")
