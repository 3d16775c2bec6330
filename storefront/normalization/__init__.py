# ==============================================
# NORMALIZATION
# ==============================================
#
# This package holds the shared idiom every record uses to read
# a raw, loosely-typed API payload: key lookup across naming
# conventions, and per-field coercion (strict or tolerant).
#
# Modules:
# --------
# - value_coercer.py  → Coerce single values (strings, tri-state bools, numbers, timestamps)
# - field_keys.py     → Prioritized candidate keys per field (camelCase / snake_case)
# - frozen_bag.py     → Read-only bag for extra fields (freeze on decode, thaw on encode)
# - payload_reader.py → Read typed fields out of one payload, raising decode errors
#
# ==============================================

from .frozen_bag import FrozenBag, freeze, thaw
from .value_coercer import ValueCoercer
from .field_keys import FieldKeys
from .payload_reader import PayloadReader

__all__ = ["ValueCoercer", "FieldKeys", "PayloadReader", "FrozenBag", "freeze", "thaw"]
