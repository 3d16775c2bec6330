import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from .frozen_bag import FrozenBag


logger = logging.getLogger(__name__)


class ValueCoercer:
    BOOL_TRUE_VARIANTS = {"true", "1", "yes"}
    BOOL_FALSE_VARIANTS = {"false", "0", "no"}

    @classmethod
    def is_number(cls, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @classmethod
    def is_finite_number(cls, value: Any) -> bool:
        if not cls.is_number(value):
            return False
        return isinstance(value, int) or math.isfinite(value)

    @classmethod
    def to_string(cls, value: Any, default: Optional[str] = "") -> Optional[str]:
        if value is None:
            return default
        if isinstance(value, bool):
            # Match the JSON spelling the API uses, not Python's repr
            return "true" if value else "false"
        return str(value)

    @classmethod
    def to_tri_state(cls, value: Any) -> Optional[bool]:
        if value is None:
            return None

        if isinstance(value, bool):
            return value

        if cls.is_number(value):
            return value != 0

        text = cls.to_string(value).strip().lower()
        if text in cls.BOOL_TRUE_VARIANTS:
            return True
        if text in cls.BOOL_FALSE_VARIANTS:
            return False

        logger.debug("Unrecognized boolean value %r, treating as unknown", value)
        return None

    @classmethod
    def try_float(cls, value: Any, default: Optional[float] = 0.0) -> Optional[float]:
        if cls.is_number(value):
            return float(value)
        try:
            return float(cls.to_string(value).strip())
        except ValueError:
            logger.debug("Could not parse %r as float, using %r", value, default)
            return default

    @classmethod
    def try_int(cls, value: Any, default: Optional[int] = None) -> Optional[int]:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        try:
            return int(cls.to_string(value).strip())
        except ValueError:
            logger.debug("Could not parse %r as int, using %r", value, default)
            return default

    @classmethod
    def to_bag(cls, value: Any) -> Optional[FrozenBag]:
        if not isinstance(value, Mapping):
            return None
        return FrozenBag(value)

    @classmethod
    def parse_timestamp(cls, value: Any) -> Optional[datetime]:
        if not isinstance(value, str):
            return None

        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"

        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None

    @classmethod
    def format_timestamp(cls, value: datetime) -> str:
        return value.isoformat()
