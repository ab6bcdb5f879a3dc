from enum import StrEnum


class Appearance(StrEnum):
    """User interface style a dynamic colour is resolved against."""
    LIGHT = "light"
    DARK = "dark"
