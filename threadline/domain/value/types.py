"""Domain value types for Threadline."""

from enum import Enum


class RejectionReason(str, Enum):
    """Why a proposed comment was not accepted.

    Values are listed in the order the checks run.
    """

    EMPTY_CONTENT = "empty_content"
    TOO_LONG = "too_long"
    COOLDOWN_ACTIVE = "cooldown_active"
    NAME_REQUIRED = "name_required"
    EMAIL_REQUIRED = "email_required"
