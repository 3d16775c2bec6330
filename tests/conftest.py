# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared payload fixtures. Payloads mimic what the storefront
# API actually sends: snake_case profile columns, numeric ids,
# Laravel-style timestamps with microseconds and a "Z" suffix.
# ==============================================

import pytest

from storefront.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def user_payload() -> dict:
    """Return a user as sent by the profile endpoint."""
    return {
        "id": 42,
        "name": "Layla Haddad",
        "email": "layla@example.com",
        "role": "customer",
        "is_blocked": 0,
        "avatar_url": "https://cdn.example.com/avatars/42.png",
        "bio": "Woodworking fan",
        "phone": "+962790000000",
        "created_at": "2024-01-15T10:30:00.000000Z",
        "updated_at": "2024-02-01T08:00:00.000000Z",
        "email_verified_at": None,
    }


@pytest.fixture
def cart_item_payload() -> dict:
    """Return a single cart line."""
    return {
        "id": "c-1",
        "quantity": 2,
        "productId": 17,
        "packageId": None,
        "itemData": {"name": "Oak Chair", "price": 129.99},
    }


@pytest.fixture
def order_payload(cart_item_payload) -> dict:
    """Return an order with two lines."""
    return {
        "id": 9001,
        "createdAt": "2024-03-10T14:05:00Z",
        "status": "pending",
        "totalPrice": 289.5,
        "items": [
            cart_item_payload,
            {"id": "c-2", "quantity": 1, "packageId": "p-3"},
        ],
        "orderData": {"address": "Amman", "delivery_fee": 3},
    }


@pytest.fixture
def chat_message_payload() -> dict:
    """Return a chat message."""
    return {
        "id": "m-1",
        "message": "Is the oak chair in stock?",
        "userId": 42,
        "timestamp": "2024-03-10T14:06:30.250000+03:00",
        "messageData": {"room": "support"},
    }


@pytest.fixture
def product_payload() -> dict:
    """Return a product as sent by the catalog endpoint."""
    return {
        "id": 1,
        "name": "Elegant Oak Dining Chair",
        "name_ar": "كرسي طعام من خشب البلوط",
        "description": "Solid oak chair.",
        "description_ar": "كرسي من خشب البلوط",
        "price": "129.99",
        "stock": "8",
        "image_url": "https://cdn.example.com/p/1.jpg",
        "images": ["https://cdn.example.com/p/1.jpg", "https://cdn.example.com/p/1b.jpg"],
        "category": {"id": 3, "name": "Chairs", "name_ar": "كراسي"},
    }
