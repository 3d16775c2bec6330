# ==============================================
# AppUser
# ==============================================
#
# PURPOSE:
#   The signed-in user as returned by the auth/profile endpoints.
#
# DECODING NOTES:
#   - id / name / email are always strings ("" when missing).
#   - The blocked flag arrives as "isBlocked" or "is_blocked" and in
#     many spellings (true, 1, "yes", "0", ...). It is tri-state:
#     True, False or None when unknown.
#   - The backend's snake_case profile columns (avatar_url, bio, ...)
#     have no typed attribute. They are folded into additional_data
#     so callers can still read them. Keys already in additional_data
#     win over the top-level copies.
#
# ==============================================

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from storefront.normalization import FieldKeys, PayloadReader, ValueCoercer, FrozenBag, thaw
from .base import Record


logger = logging.getLogger(__name__)


USER_KEYS = FieldKeys({
    "id": ("id",),
    "name": ("name",),
    "email": ("email",),
    "role": ("role",),
    "is_blocked": ("isBlocked", "is_blocked"),
    "additional_data": ("additionalData",),
})

# Snake_case user columns copied into additional_data, in merge order
PROFILE_EXTRA_KEYS = (
    "google_id",
    "avatar_url",
    "bio",
    "location",
    "phone",
    "is_private",
    "is_blocked",
    "blocked_at",
    "blocked_by",
    "email_verified_at",
    "profile_verified_at",
    "created_at",
    "updated_at",
    "status",
)

# Canonical keys of the typed attributes, never duplicated in the bag
_TYPED_KEYS = {USER_KEYS.candidates(name)[0] for name in (
    "id", "name", "email", "role", "is_blocked", "additional_data",
)}


@dataclass(frozen=True)
class AppUser(Record):
    _bag_fields = ("additional_data",)

    id: str
    name: str
    email: str
    role: Optional[str] = None
    is_blocked: Optional[bool] = None
    additional_data: Optional[FrozenBag] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "AppUser":
        reader = PayloadReader("AppUser", data, USER_KEYS)

        additional = dict(ValueCoercer.to_bag(reader.raw("additional_data")) or {})
        for key in PROFILE_EXTRA_KEYS:
            if key in _TYPED_KEYS:
                continue
            if key in data and key not in additional:
                additional[key] = data[key]
        if additional:
            logger.debug("AppUser additional_data keys: %s", sorted(additional))

        return cls(
            id=reader.string("id"),
            name=reader.string("name"),
            email=reader.string("email"),
            role=reader.optional_string("role"),
            is_blocked=reader.tri_state("is_blocked"),
            additional_data=FrozenBag(additional) if additional else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "isBlocked": self.is_blocked,
            "additionalData": thaw(self.additional_data),
        }
