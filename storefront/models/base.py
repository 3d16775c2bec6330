import dataclasses
from typing import Any, Dict, Tuple, TypeVar

from storefront.normalization import freeze


T = TypeVar("T", bound="Record")


class Record:
    """
    Shared behaviour for the immutable payload records.

    Subclasses are frozen dataclasses that implement `from_dict` and
    `to_dict`. Fields named in `_bag_fields` hold open extra-field bags
    and are frozen on construction.
    """

    _bag_fields: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in self._bag_fields:
            object.__setattr__(self, name, freeze(getattr(self, name)))

    @classmethod
    def from_dict(cls, data) -> "Record":
        """Decode a raw payload. Subclasses must override this."""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Encode to a camelCase payload. Subclasses must override this."""
        raise NotImplementedError

    def copy_with(self: T, **overrides: Any) -> T:
        """
        Return a new record with the given fields replaced.

        Overrides that are None keep the current value, so an optional
        field cannot be cleared through this method. No validation is run.

        Raises:
            TypeError: If an override names an unknown field
        """
        changes = {name: value for name, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)
