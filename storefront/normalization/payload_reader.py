import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from storefront.errors import MalformedTimestamp, MissingRequiredSequence, TypeMismatch
from .field_keys import FieldKeys
from .frozen_bag import FrozenBag
from .value_coercer import ValueCoercer


logger = logging.getLogger(__name__)

R = TypeVar("R")

_SEQUENCE_TYPES = (list, tuple)


class PayloadReader:
    def __init__(self, record: str, payload: Any, keys: Optional[FieldKeys] = None):
        if not isinstance(payload, Mapping):
            raise TypeMismatch(record, "<payload>", payload, "expected a mapping")
        self.record = record
        self.payload = payload
        self.keys = keys or FieldKeys({})

    def raw(self, field: str) -> Any:
        return self.keys.lookup(self.payload, field)

    def has(self, field: str) -> bool:
        return self.keys.has_any(self.payload, field)

    def string(self, field: str, default: str = "") -> str:
        return ValueCoercer.to_string(self.raw(field), default)

    def optional_string(self, field: str) -> Optional[str]:
        return ValueCoercer.to_string(self.raw(field), None)

    def strict_int(self, field: str) -> int:
        value = self.raw(field)
        if not ValueCoercer.is_finite_number(value):
            self._fail(TypeMismatch, field, value, "expected a finite number")
        return int(value)

    def strict_float(self, field: str) -> float:
        value = self.raw(field)
        if not ValueCoercer.is_finite_number(value):
            self._fail(TypeMismatch, field, value, "expected a finite number")
        return float(value)

    def tolerant_float(self, field: str, default: float = 0.0) -> float:
        value = self.raw(field)
        if value is None:
            return default
        return ValueCoercer.try_float(value, default)

    def tolerant_int(self, field: str, default: Optional[int] = None,
                     missing: Optional[int] = None) -> Optional[int]:
        """
        Best-effort integer parse.

        `missing` is used when no candidate key exists at all; a key that
        is present but null or unparsable yields `default`.
        """
        if not self.has(field):
            return missing
        value = self.raw(field)
        if value is None:
            return default
        return ValueCoercer.try_int(value, default)

    def tri_state(self, field: str) -> Optional[bool]:
        return ValueCoercer.to_tri_state(self.raw(field))

    def bag(self, field: str) -> Optional[FrozenBag]:
        bag = ValueCoercer.to_bag(self.raw(field))
        return bag or None

    def timestamp(self, field: str) -> datetime:
        value = self.raw(field)
        parsed = ValueCoercer.parse_timestamp(value)
        if parsed is None:
            self._fail(MalformedTimestamp, field, value)
        return parsed

    def lenient_timestamp(self, field: str, fallback: Callable[[], datetime]) -> datetime:
        parsed = ValueCoercer.parse_timestamp(self.raw(field))
        if parsed is None:
            logger.debug("%s.%s: unparsable timestamp, using fallback", self.record, field)
            return fallback()
        return parsed

    def nested(self, field: str, decode: Callable[[Mapping], R]) -> Optional[R]:
        value = self.raw(field)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            self._fail(TypeMismatch, field, value, "expected an object")
        return decode(value)

    def records(self, field: str, decode: Callable[[Mapping], R],
                required: bool = True) -> Tuple[R, ...]:
        value = self.raw(field)
        if value is None and not required:
            return ()
        if not isinstance(value, _SEQUENCE_TYPES):
            self._fail(MissingRequiredSequence, field, value)

        decoded: List[R] = []
        for index, item in enumerate(value):
            if not isinstance(item, Mapping):
                self._fail(TypeMismatch, f"{field}[{index}]", item, "expected an object")
            decoded.append(decode(item))
        return tuple(decoded)

    def strings(self, field: str) -> Optional[Tuple[str, ...]]:
        value = self.raw(field)
        if value is None:
            return None
        if not isinstance(value, _SEQUENCE_TYPES):
            self._fail(TypeMismatch, field, value, "expected a list")
        return tuple(ValueCoercer.to_string(item) for item in value)

    def _fail(self, error_cls, field: str, value: Any, detail: Optional[str] = None) -> None:
        logger.debug("Rejecting %s.%s = %r", self.record, field, value)
        raise error_cls(self.record, field, value, detail)
