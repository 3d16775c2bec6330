# ==============================================
# FrozenBag
# ==============================================
#
# PURPOSE:
#   Read-only storage for the open "extra fields" bags
#   (additional_data, item_data, order_data, message_data).
#
# WHY THIS CLASS EXISTS:
#   Records are frozen dataclasses that get shared freely. A plain
#   dict inside one would let any holder change the record in place,
#   and would make the record unhashable. The bag is frozen all the
#   way down on the way in, and thawed back into fresh dicts/lists on
#   the way out, so an encoded payload never aliases a record.
#
# CLASS: FrozenBag(Mapping)
# -------------------------
#   - Compares equal to any mapping with the same items.
#   - Hashes on its keys only (values may be nested bags).
#
# FUNCTIONS:
# ----------
# - freeze(value) -> Any
#     Mapping -> FrozenBag, list/tuple -> tuple, recursively.
#
# - thaw(value) -> Any
#     FrozenBag -> dict, tuple -> list, recursively.
#
# ==============================================

from collections.abc import Mapping
from typing import Any, Dict, Iterator


class FrozenBag(Mapping):
    """Immutable string-keyed mapping of opaque payload values."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping = None):
        self._data: Dict[str, Any] = {
            str(key): freeze(value) for key, value in (data or {}).items()
        }

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data))

    def __repr__(self) -> str:
        return f"FrozenBag({self._data!r})"


def freeze(value: Any) -> Any:
    if isinstance(value, FrozenBag):
        return value
    if isinstance(value, Mapping):
        return FrozenBag(value)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value
