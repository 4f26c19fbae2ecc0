from enum import Enum


class Color(Enum):

    """
    The fixed six-color alphabet codes are drawn from.

    Each member's value is its one-letter canonical code. Declaration order is the
    alphabet order used whenever colors are iterated deterministically.
    """

    GREEN = "G"
    BLUE = "B"
    RED = "R"
    YELLOW = "Y"
    PURPLE = "P"
    CYAN = "C"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name

    @classmethod
    def from_code(cls, code: str) -> "Color":
        return _BY_CODE[code.upper()]

    @classmethod
    def from_name(cls, name: str) -> "Color":
        return cls[name.upper()]

    def __str__(self) -> str:
        return self.value


ALPHABET: tuple[Color, ...] = tuple(Color)

_BY_CODE = {color.value: color for color in Color}

CODES = tuple(_BY_CODE)
NAMES = tuple(color.name for color in Color)
