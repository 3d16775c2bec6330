# ==============================================
# MODELS
# ==============================================
#
# Immutable records for the storefront API payloads.
# Every record is a frozen dataclass with:
#   - from_dict(payload)   → decode a raw payload
#   - to_dict()            → encode to a camelCase payload
#   - copy_with(**fields)  → copy with some fields replaced
#
# Modules:
# --------
# - user.py    → AppUser
# - cart.py    → AppCartItem
# - order.py   → AppOrder
# - chat.py    → AppChatMessage
# - product.py → ProductDetailsData, ProductCategory, comments, ratings
# - theme.py   → AppTheme
# - state.py   → AppState (whole store snapshot)
#
# ==============================================

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Type, TypeVar

from storefront.errors import MissingRequiredSequence, TypeMismatch
from .base import Record
from .user import AppUser
from .cart import AppCartItem
from .order import AppOrder
from .chat import AppChatMessage
from .product import (
    ProductCategory,
    ProductCommentData,
    ProductDetailsData,
    ProductRatingData,
    ProductReviewFormData,
    ProductUserData,
    ProductUserRating,
)
from .theme import AppTheme
from .state import AppState

R = TypeVar("R", bound=Record)


def decode_many(record_cls: Type[R], payloads: Any) -> List[R]:
    """
    Decode a list payload (e.g., the orders or comments endpoint).

    Args:
        record_cls: Record class to decode each element into
        payloads: Raw list of payloads

    Returns:
        Decoded records, in input order

    Raises:
        MissingRequiredSequence: If payloads is not a list
        PayloadDecodeError: If any element fails to decode
    """
    if not isinstance(payloads, (list, tuple)):
        raise MissingRequiredSequence(record_cls.__name__, "<list>", payloads)
    records = []
    for index, payload in enumerate(payloads):
        if not isinstance(payload, Mapping):
            raise TypeMismatch(record_cls.__name__, f"[{index}]", payload, "expected an object")
        records.append(record_cls.from_dict(payload))
    return records


def encode_many(records: Iterable[Record]) -> List[Dict[str, Any]]:
    """Encode records into a list payload."""
    return [record.to_dict() for record in records]


__all__ = [
    "Record",
    "AppUser",
    "AppCartItem",
    "AppOrder",
    "AppChatMessage",
    "ProductCategory",
    "ProductCommentData",
    "ProductDetailsData",
    "ProductRatingData",
    "ProductReviewFormData",
    "ProductUserData",
    "ProductUserRating",
    "AppTheme",
    "AppState",
    "decode_many",
    "encode_many",
]
