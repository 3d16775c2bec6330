# ==============================================
# Decode Errors
# ==============================================
#
# PURPOSE:
#   Exceptions raised when a payload cannot be turned into a record.
#   Only hard failures live here. Tolerant fields (price, stock,
#   tri-state booleans) fall back to a default and never raise.
#
# CLASSES:
# --------
# - PayloadDecodeError(ValueError)   → Base class, carries record + field
# - MalformedTimestamp               → Required ISO-8601 field is missing or invalid
# - MissingRequiredSequence          → Required list field is missing or not a list
# - TypeMismatch                     → Strict numeric / nested field has the wrong type
#
# ==============================================

from typing import Any, Optional


class PayloadDecodeError(ValueError):
    """
    Raised when a payload cannot be decoded into a record.

    Attributes:
        record: Name of the record being decoded (e.g., "AppOrder")
        field: Name of the offending field
        value: The raw value that was rejected
    """

    default_detail = "could not decode field"

    def __init__(self, record: str, field: str, value: Any = None, detail: Optional[str] = None):
        self.record = record
        self.field = field
        self.value = value
        message = f"{record}.{field}: {detail or self.default_detail} (got {value!r})"
        super().__init__(message)


class MalformedTimestamp(PayloadDecodeError):
    default_detail = "expected an ISO-8601 timestamp"


class MissingRequiredSequence(PayloadDecodeError):
    default_detail = "expected a list"


class TypeMismatch(PayloadDecodeError):
    default_detail = "unexpected value type"
