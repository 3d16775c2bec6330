from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from storefront.normalization import FieldKeys, PayloadReader, ValueCoercer, FrozenBag, thaw
from .base import Record
from .cart import AppCartItem


ORDER_KEYS = FieldKeys({
    "created_at": ("createdAt",),
    "total_price": ("totalPrice",),
    "order_data": ("orderData",),
})


@dataclass(frozen=True)
class AppOrder(Record):
    """
    A placed order.

    `created_at`, `total_price` and `items` are all required. A bad value
    in any of them fails the whole decode instead of producing a partial
    order.
    """
    _bag_fields = ("order_data",)

    id: str
    created_at: datetime
    status: str
    total_price: float
    items: Tuple[AppCartItem, ...]
    order_data: Optional[FrozenBag] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppOrder":
        reader = PayloadReader("AppOrder", data, ORDER_KEYS)
        return cls(
            id=reader.string("id"),
            created_at=reader.timestamp("created_at"),
            status=reader.string("status"),
            total_price=reader.strict_float("total_price"),
            items=reader.records("items", AppCartItem.from_dict),
            order_data=reader.bag("order_data"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "createdAt": ValueCoercer.format_timestamp(self.created_at),
            "status": self.status,
            "totalPrice": self.total_price,
            "items": [item.to_dict() for item in self.items],
            "orderData": thaw(self.order_data),
        }
