# ==============================================
# Tests for AppUser
# ==============================================

import pytest

from storefront.models import AppUser
from storefront.models.base import Record
from storefront.models import user as user_module


class TestAppUserDecode:
    """Decoding user payloads from the auth/profile endpoints."""

    def test_mixed_payload(self):
        """Numeric id, snake_case flag and profile column."""
        user = AppUser.from_dict({
            "id": 5, "name": "Ana", "email": "a@x.com", "is_blocked": "yes", "bio": "hi",
        })
        assert user.id == "5"
        assert user.name == "Ana"
        assert user.email == "a@x.com"
        assert user.is_blocked is True
        assert user.additional_data == {"bio": "hi", "is_blocked": "yes"}

    def test_missing_required_strings_become_empty(self):
        user = AppUser.from_dict({"name": None})
        assert user.id == ""
        assert user.name == ""
        assert user.email == ""
        assert user.role is None
        assert user.is_blocked is None
        assert user.additional_data is None

    def test_camel_case_flag_has_priority(self):
        user = AppUser.from_dict({"isBlocked": False, "is_blocked": "yes"})
        assert user.is_blocked is False

    def test_null_camel_case_flag_falls_back(self):
        user = AppUser.from_dict({"isBlocked": None, "is_blocked": 1})
        assert user.is_blocked is True

    @pytest.mark.parametrize("value", [True, "true", "1", "yes", 1])
    def test_blocked_truthy(self, value):
        assert AppUser.from_dict({"is_blocked": value}).is_blocked is True

    @pytest.mark.parametrize("value", [False, "false", "0", "no", 0])
    def test_blocked_falsy(self, value):
        assert AppUser.from_dict({"isBlocked": value}).is_blocked is False

    @pytest.mark.parametrize("value", ["maybe", None, "blocked"])
    def test_blocked_unknown(self, value):
        assert AppUser.from_dict({"isBlocked": value}).is_blocked is None

    def test_role_stringified(self):
        assert AppUser.from_dict({"role": 3}).role == "3"

    def test_profile_columns_folded_into_bag(self, user_payload):
        user = AppUser.from_dict(user_payload)
        assert user.is_blocked is False
        assert user.additional_data == {
            "avatar_url": "https://cdn.example.com/avatars/42.png",
            "bio": "Woodworking fan",
            "phone": "+962790000000",
            "is_blocked": 0,
            "email_verified_at": None,
            "created_at": "2024-01-15T10:30:00.000000Z",
            "updated_at": "2024-02-01T08:00:00.000000Z",
        }

    def test_existing_bag_wins(self):
        """Keys already in additionalData are not overwritten by top-level copies."""
        user = AppUser.from_dict({
            "additionalData": {"bio": "from bag"},
            "bio": "from top level",
            "location": "Amman",
        })
        assert user.additional_data == {"bio": "from bag", "location": "Amman"}

    def test_unknown_columns_ignored(self):
        user = AppUser.from_dict({"nickname": "lh", "favourite_colour": "green"})
        assert user.additional_data is None

    def test_non_mapping_bag_ignored(self):
        user = AppUser.from_dict({"additionalData": ["a", "b"]})
        assert user.additional_data is None

    def test_typed_keys_never_duplicated(self, monkeypatch):
        """Even if 'role' were an extra column it must stay out of the bag."""
        monkeypatch.setattr(
            user_module, "PROFILE_EXTRA_KEYS", user_module.PROFILE_EXTRA_KEYS + ("role", "email"),
        )
        user = AppUser.from_dict({"role": "admin", "email": "x@y.z", "bio": "hi"})
        assert user.role == "admin"
        assert user.additional_data == {"bio": "hi"}


class TestAppUserEncode:
    """Encoding and copying users."""

    def test_to_dict_is_camel_case_with_nulls(self):
        user = AppUser(id="1", name="A", email="a@x.com")
        assert user.to_dict() == {
            "id": "1",
            "name": "A",
            "email": "a@x.com",
            "role": None,
            "isBlocked": None,
            "additionalData": None,
        }

    def test_round_trip(self, user_payload):
        user = AppUser.from_dict(user_payload)
        assert AppUser.from_dict(user.to_dict()) == user

    def test_copy_with(self, user_payload):
        user = AppUser.from_dict(user_payload)
        promoted = user.copy_with(role="admin", is_blocked=True)
        assert promoted.role == "admin"
        assert promoted.is_blocked is True
        assert promoted.email == user.email
        assert user.role == "customer"

    def test_copy_with_none_keeps_value(self):
        user = AppUser(id="1", name="A", email="a@x.com", role="customer")
        assert user.copy_with(role=None).role == "customer"

    def test_copy_with_unknown_field(self):
        with pytest.raises(TypeError):
            AppUser(id="1", name="A", email="a").copy_with(nickname="x")

    def test_frozen(self):
        user = AppUser(id="1", name="A", email="a")
        with pytest.raises(AttributeError):
            user.name = "B"

    def test_to_dict_does_not_alias_additional_data(self, user_payload):
        user = AppUser.from_dict(user_payload)
        payload = user.to_dict()
        payload["additionalData"]["bio"] = "changed"
        assert user.additional_data["bio"] == "Woodworking fan"

    def test_additional_data_is_read_only(self, user_payload):
        user = AppUser.from_dict(user_payload)
        with pytest.raises(TypeError):
            user.additional_data["bio"] = "changed"
        assert hash(user) == hash(AppUser.from_dict(user_payload))


class TestRecordBase:
    """Tests for the shared record base."""

    def test_base_codec_must_be_overridden(self):
        with pytest.raises(NotImplementedError):
            Record.from_dict({})
        with pytest.raises(NotImplementedError):
            Record().to_dict()
