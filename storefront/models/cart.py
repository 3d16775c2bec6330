from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from storefront.normalization import FieldKeys, PayloadReader, FrozenBag, thaw
from .base import Record


CART_ITEM_KEYS = FieldKeys({
    "product_id": ("productId",),
    "package_id": ("packageId",),
    "item_data": ("itemData",),
})


@dataclass(frozen=True)
class AppCartItem(Record):
    """
    One line of the shopping cart.

    `quantity` is read strictly: the payload must carry a real number.
    Cart math must never run on a silently defaulted quantity.
    """
    _bag_fields = ("item_data",)

    id: str
    quantity: int
    product_id: Optional[str] = None
    package_id: Optional[str] = None
    item_data: Optional[FrozenBag] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppCartItem":
        reader = PayloadReader("AppCartItem", data, CART_ITEM_KEYS)
        return cls(
            id=reader.string("id"),
            quantity=reader.strict_int("quantity"),
            product_id=reader.optional_string("product_id"),
            package_id=reader.optional_string("package_id"),
            item_data=reader.bag("item_data"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "quantity": self.quantity,
            "productId": self.product_id,
            "packageId": self.package_id,
            "itemData": thaw(self.item_data),
        }
