from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

# Thai name numerology values (consonants, vowel signs and tone marks).
# Combining marks are written as escapes so they don't fuse with the quotes.
THAI_NUMBER_VALUES: MappingProxyType[str, int] = MappingProxyType({
    "ก": 1,
    "ด": 1,
    "ท": 1,
    "ถ": 1,
    "ภ": 1,
    "ฤ": 1,
    "ฦ": 1,
    "\u0e48": 1,  # mai ek
    "\u0e38": 1,  # sara u
    "า": 1,
    "ำ": 1,

    "ข": 2,
    "ช": 2,
    "ง": 2,
    "บ": 2,
    "ป": 2,
    "\u0e49": 2,  # mai tho
    "เ": 2,
    "แ": 2,
    "\u0e39": 2,  # sara uu

    "ฆ": 3,
    "ต": 3,
    "ฑ": 3,
    "ฒ": 3,
    "\u0e4b": 3,  # mai chattawa

    "ค": 4,
    "ธ": 4,
    "ญ": 4,
    "ร": 4,
    "ษ": 4,
    "ะ": 4,
    "\u0e34": 4,  # sara i
    "โ": 4,
    "\u0e31": 4,  # mai han-akat

    "ฉ": 5,
    "ณ": 5,
    "ฌ": 5,
    "น": 5,
    "ม": 5,
    "ห": 5,
    "ฎ": 5,
    "ฬ": 5,
    "ฮ": 5,
    "\u0e36": 5,  # sara ue

    "จ": 6,
    "ล": 6,
    "ว": 6,
    "อ": 6,
    "ใ": 6,

    "ซ": 7,
    "ศ": 7,
    "ส": 7,
    "\u0e4a": 7,  # mai tri
    "\u0e35": 7,  # sara ii
    "\u0e37": 7,  # sara uee

    "ผ": 8,
    "ฝ": 8,
    "พ": 8,
    "ฟ": 8,
    "ย": 8,
    "\u0e47": 8,  # maitaikhu

    "ฏ": 9,
    "ฐ": 9,
    "ไ": 9,
    "\u0e4c": 9,  # thanthakhat
})


class InvalidCharacterError(ValueError):
    """Raised when a character has no numerology value."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"invalid character: {character}")


@dataclass(frozen=True)
class EvaluationResult:
    name: str
    scores: tuple[tuple[str, int], ...]

    @property
    def total(self) -> int:
        return sum(value for _, value in self.scores)

    @property
    def breakdown(self) -> str:
        # Every fragment keeps its trailing space, including the last one.
        return "".join(f"{ch} = {value} " for ch, value in self.scores)


def score_character(ch: str) -> int:
    """
    Return the numerology value of a single code point.

    Raises InvalidCharacterError for anything outside the table (spaces,
    digits, Latin letters, punctuation...).
    """
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    try:
        return THAI_NUMBER_VALUES[ch]
    except KeyError:
        raise InvalidCharacterError(ch) from None


def evaluate_name(name: str) -> EvaluationResult:
    """
    Score every code point of `name` in order.

    Stops at the first character that has no value; nothing scored before it
    is returned. No Unicode normalization is applied (NFKC would split sara am
    into nikhahit + sara aa), so combining marks count on their own.

    Example:
      evaluate_name("กข").total == 3
      evaluate_name("กข").breakdown == "ก = 1 ข = 2 "
    """
    scores = tuple((ch, score_character(ch)) for ch in name)
    return EvaluationResult(name=name, scores=scores)


def compute_name_number(name: str) -> int:
    return evaluate_name(name).total


def format_reply(result: EvaluationResult) -> str:
    """Render the chat reply for an evaluated name."""
    return f"ชื่อ {result.name}\nผลรวม = {result.total}\n{result.breakdown}"
