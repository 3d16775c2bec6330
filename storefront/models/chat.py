from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from storefront.normalization import FieldKeys, PayloadReader, ValueCoercer, FrozenBag, thaw
from .base import Record


CHAT_MESSAGE_KEYS = FieldKeys({
    "user_id": ("userId",),
    "message_data": ("messageData",),
})


@dataclass(frozen=True)
class AppChatMessage(Record):
    """A single chat message. `timestamp` must be ISO-8601."""
    _bag_fields = ("message_data",)

    id: str
    message: str
    timestamp: datetime
    user_id: Optional[str] = None
    message_data: Optional[FrozenBag] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppChatMessage":
        reader = PayloadReader("AppChatMessage", data, CHAT_MESSAGE_KEYS)
        return cls(
            id=reader.string("id"),
            message=reader.string("message"),
            user_id=reader.optional_string("user_id"),
            timestamp=reader.timestamp("timestamp"),
            message_data=reader.bag("message_data"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "userId": self.user_id,
            "timestamp": ValueCoercer.format_timestamp(self.timestamp),
            "messageData": thaw(self.message_data),
        }
