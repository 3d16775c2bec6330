# ==============================================
# Storefront Models
# ==============================================
#
# Package Structure:
#
# storefront/
# ├── normalization/    # Shared payload-reading idiom (key lookup + coercion)
# ├── models/           # Immutable records: user, cart, order, chat, product, state
# ├── errors.py         # Hard decode failures
# └── config.py         # Configuration management
#
# ==============================================

__version__ = "0.1.0"
