# ==============================================
# AppState
# ==============================================
#
# PURPOSE:
#   Snapshot of everything the app store holds: user, cart,
#   wishlist, orders, theme, chat history and navigation state.
#   Serialized as one payload so a cache writer can save it and
#   restore it on the next launch.
#
# DECODING NOTES:
#   - Every list defaults to empty when missing or null.
#   - Elements are decoded with each record's own rules, so a bad
#     order inside "orders" still fails the whole decode.
#   - theme / currentPage fall back to the configured defaults
#     (see storefront.config.StateDefaults).
#
# ==============================================

from collections.abc import Mapping
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from storefront.config import AppConfig, get_config
from storefront.normalization import FieldKeys, PayloadReader
from .base import Record
from .cart import AppCartItem
from .chat import AppChatMessage
from .order import AppOrder
from .theme import AppTheme
from .user import AppUser


LOGOUT_PAGE = "logout"

STATE_KEYS = FieldKeys({
    "chat_messages": ("chatMessages",),
    "search_query": ("searchQuery",),
    "current_page": ("currentPage",),
    "selected_id": ("selectedId",),
})


@dataclass(frozen=True)
class AppState(Record):
    user: Optional[AppUser] = None
    cart: Tuple[AppCartItem, ...] = ()
    wishlist: Tuple[str, ...] = ()
    orders: Tuple[AppOrder, ...] = ()
    theme: AppTheme = AppTheme.LIGHT
    chat_messages: Tuple[AppChatMessage, ...] = ()
    search_query: str = ""
    current_page: str = "home"
    selected_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping, config: Optional[AppConfig] = None) -> "AppState":
        """
        Rebuild a state snapshot from its payload.

        Args:
            data: Payload produced by to_dict()
            config: Optional configuration. If None, loads from environment.

        Returns:
            An AppState instance

        Raises:
            PayloadDecodeError: If a nested record fails to decode
        """
        defaults = (config or get_config()).defaults
        reader = PayloadReader("AppState", data, STATE_KEYS)

        theme = reader.raw("theme")
        return cls(
            user=reader.nested("user", AppUser.from_dict),
            cart=reader.records("cart", AppCartItem.from_dict, required=False),
            wishlist=reader.strings("wishlist") or (),
            orders=reader.records("orders", AppOrder.from_dict, required=False),
            theme=AppTheme.from_string(theme if theme is not None else defaults.theme),
            chat_messages=reader.records("chat_messages", AppChatMessage.from_dict, required=False),
            search_query=reader.string("search_query"),
            current_page=reader.string("current_page", default=defaults.current_page),
            selected_id=reader.string("selected_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user.to_dict() if self.user else None,
            "cart": [item.to_dict() for item in self.cart],
            "wishlist": list(self.wishlist),
            "orders": [order.to_dict() for order in self.orders],
            "theme": self.theme.value,
            "chatMessages": [message.to_dict() for message in self.chat_messages],
            "searchQuery": self.search_query,
            "currentPage": self.current_page,
            "selectedId": self.selected_id,
        }

    # --- Store actions (each returns a new snapshot) ---

    def set_user(self, user: Optional[AppUser]) -> "AppState":
        return dataclasses.replace(self, user=user)

    def add_to_cart(self, item: AppCartItem) -> "AppState":
        """
        Add a line to the cart.

        A line with the same id absorbs the new quantity instead of
        being duplicated.
        """
        cart = list(self.cart)
        for index, existing in enumerate(cart):
            if existing.id == item.id:
                cart[index] = existing.copy_with(quantity=existing.quantity + item.quantity)
                break
        else:
            cart.append(item)
        return dataclasses.replace(self, cart=tuple(cart))

    def remove_from_cart(self, item_id: str) -> "AppState":
        cart = tuple(item for item in self.cart if item.id != item_id)
        return dataclasses.replace(self, cart=cart)

    def update_cart_quantity(self, item_id: str, quantity: int) -> "AppState":
        """
        Set the quantity of one cart line.

        A quantity of zero or less removes the line. An unknown id
        leaves the cart untouched.
        """
        if quantity <= 0:
            return self.remove_from_cart(item_id)

        cart = tuple(
            item.copy_with(quantity=quantity) if item.id == item_id else item
            for item in self.cart
        )
        return dataclasses.replace(self, cart=cart)

    def clear_cart(self) -> "AppState":
        return dataclasses.replace(self, cart=())

    def toggle_wishlist(self, product_id: str) -> "AppState":
        if product_id in self.wishlist:
            wishlist = list(self.wishlist)
            wishlist.remove(product_id)
        else:
            wishlist = list(self.wishlist) + [product_id]
        return dataclasses.replace(self, wishlist=tuple(wishlist))

    def add_order(self, order: AppOrder) -> "AppState":
        """Record a new order. Newest orders come first."""
        return dataclasses.replace(self, orders=(order,) + self.orders)

    def add_chat_message(self, message: AppChatMessage) -> "AppState":
        return dataclasses.replace(self, chat_messages=self.chat_messages + (message,))

    def toggle_theme(self) -> "AppState":
        return dataclasses.replace(self, theme=self.theme.toggled())

    def set_search_query(self, query: str) -> "AppState":
        return dataclasses.replace(self, search_query=query)

    def navigate(self, page: str, selected_id: Optional[str] = None) -> "AppState":
        """
        Move to another page.

        Args:
            page: Target page name; "logout" signs the user out
            selected_id: Id of the item the page shows, if any

        Returns:
            The updated snapshot
        """
        if page == LOGOUT_PAGE:
            return dataclasses.replace(self, user=None, current_page="home", selected_id="")
        return dataclasses.replace(self, current_page=page, selected_id=selected_id or "")
