from enum import Enum
from typing import Any


class AppTheme(Enum):
    """
    Colour theme selected in the app settings.

    - LIGHT: default theme
    - DARK: dark theme
    """
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_string(cls, value: Any) -> "AppTheme":
        """
        Look up a theme by its stored value.

        Args:
            value: Stored theme name (e.g., "dark")

        Returns:
            The matching theme, or LIGHT for unknown / missing values
        """
        for theme in cls:
            if theme.value == value:
                return theme
        return cls.LIGHT

    def toggled(self) -> "AppTheme":
        return AppTheme.DARK if self is AppTheme.LIGHT else AppTheme.LIGHT
