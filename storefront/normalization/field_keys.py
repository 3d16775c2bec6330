# ==============================================
# FieldKeys
# ==============================================
#
# PURPOSE:
#   Resolve one logical field from a payload that may spell its
#   key in more than one naming convention.
#
# WHY THIS CLASS EXISTS:
#   The storefront API is not consistent about key names:
#     - "isBlocked" vs "is_blocked"
#     - "image_url" vs "imageUrl" vs "image"
#     - "name_ar" vs "nameAr"
#   The accepted spellings are a fixed compatibility table. They are
#   listed explicitly per record, never derived by case conversion,
#   so a field only accepts the spellings the API is known to send
#   (plus the camelCase spelling our own to_dict() produces).
#
# CLASS: FieldKeys
# ----------------
#   Immutable table of field name -> candidate keys.
#
#   Methods:
#   --------
#   - candidates(field: str) -> tuple[str, ...]
#       Keys consulted for a field, in priority order.
#
#   - lookup(payload: Mapping, field: str) -> Any
#       First candidate whose value is not None, else None.
#
#   - has_any(payload: Mapping, field: str) -> bool
#       True if any candidate key is present (even with a null value).
#
# RULES:
# ------
#   1. Candidates are evaluated in the order given.
#   2. A present key holding None does not stop the search.
#   3. A field with no entry in the table is looked up by its own name.
#
# ==============================================

from collections.abc import Mapping
from typing import Any, Dict, Sequence, Tuple


class FieldKeys:
    """
    Prioritized candidate keys for each typed field of one record.
    """

    def __init__(self, table: Dict[str, Sequence[str]]):
        """
        Build the lookup table.

        Args:
            table: Field name -> candidate keys in priority order
                   (e.g., {"is_blocked": ("isBlocked", "is_blocked")})
        """
        self._table: Dict[str, Tuple[str, ...]] = {
            name: tuple(keys) for name, keys in table.items()
        }

    def candidates(self, field: str) -> Tuple[str, ...]:
        """
        Get the keys consulted for a field.

        Args:
            field: Typed field name

        Returns:
            Candidate keys in priority order
        """
        return self._table.get(field, (field,))

    def lookup(self, payload: Mapping, field: str) -> Any:
        """
        Return the first non-null value among the field's candidate keys.

        Args:
            payload: Raw key-value payload
            field: Typed field name

        Returns:
            The matched value, or None if no candidate holds a value
        """
        for key in self.candidates(field):
            value = payload.get(key)
            if value is not None:
                return value
        return None

    def has_any(self, payload: Mapping, field: str) -> bool:
        """
        Check whether any candidate key is present in the payload.

        Args:
            payload: Raw key-value payload
            field: Typed field name

        Returns:
            True if at least one candidate key exists, even if null
        """
        return any(key in payload for key in self.candidates(field))

