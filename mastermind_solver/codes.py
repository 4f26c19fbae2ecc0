import random as rnd
import re

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from mastermind_solver.colors import ALPHABET, CODES, NAMES, Color
from mastermind_solver.config import CODE_LENGTH
from mastermind_solver.errors import DuplicateColorError, InvalidLengthError, UnrecognizedColorError

SEPARATORS = re.compile(r"[\s,;/|\-_.]+")


@dataclass(frozen=True)
class Code:

    """
    An ordered sequence of exactly four distinct colors, used for both guesses and secrets.
    """

    colors: tuple[Color, ...]

    def __init__(self, colors: Iterable[Color]):
        colors = tuple(colors)
        text = " ".join(str(color) for color in colors)

        if len(colors) != CODE_LENGTH:
            raise InvalidLengthError(text, f"'{text}' is not valid, a code has exactly {CODE_LENGTH} colors.")
        if not all(isinstance(color, Color) for color in colors):
            raise UnrecognizedColorError(text, f"'{text}' is not valid, you have to chose from ({', '.join(CODES)}).")
        repeated = _repeated(colors)
        if repeated:
            raise DuplicateColorError(text, f"'{text}' is not valid, each color has to be unique (repeated: {', '.join(map(str, repeated))}).")

        object.__setattr__(self, "colors", colors)

    @classmethod
    def parse(cls, text: str) -> "Code":
        """
        Parses user input into a Code.

        Whitespace and separator punctuation are stripped and the input is upper-cased. Either four full
        color names ("red, blue, yellow, green") or four one-letter codes ("RBYG", "R B Y G", "r,b,y,g")
        are accepted.

        Args:
            text (str): The raw input.

        Returns:
            Code: The parsed code.

        Raises:
            InvalidLengthError: If the input does not hold exactly four colors.
            UnrecognizedColorError: If a token is not a known color.
            DuplicateColorError: If a color is repeated.
        """

        tokens = [token for token in SEPARATORS.split(text.strip().upper()) if token]

        # Full names only when every token is a name; otherwise every character is a code
        if tokens and all(token in NAMES for token in tokens):
            symbols = tokens
            lookup = Color.from_name
        else:
            symbols = list("".join(tokens))
            lookup = Color.from_code

        if len(symbols) != CODE_LENGTH:
            raise InvalidLengthError(text, f"'{text}' is not valid, you have to chose {CODE_LENGTH} colors from ({', '.join(CODES)}).")

        unknown = [symbol for symbol in symbols if symbol not in CODES and symbol not in NAMES]
        if unknown:
            raise UnrecognizedColorError(text, f"'{text}' is not valid, you have to chose from ({', '.join(CODES)}).")

        colors = [lookup(symbol) for symbol in symbols]
        repeated = _repeated(colors)
        if repeated:
            raise DuplicateColorError(text, f"'{text}' is not valid, each color has to be unique.")

        return cls(colors)

    @classmethod
    def generate_random_unique(cls, rng: Optional[rnd.Random] = None) -> "Code":
        """
        Samples four distinct colors without replacement. Sampling order is the code order.
        """
        rng = rng or rnd
        return cls(rng.sample(ALPHABET, CODE_LENGTH))

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    def __len__(self) -> int:
        return len(self.colors)

    def __str__(self) -> str:
        return " ".join(str(color) for color in self.colors)

    def __repr__(self) -> str:
        return f"Code('{self}')"

    def names(self) -> list[str]:
        return [color.display_name for color in self.colors]


def _repeated(colors) -> list:
    seen = set()
    repeated = []
    for color in colors:
        if color in seen and color not in repeated:
            repeated.append(color)
        seen.add(color)
    return repeated
