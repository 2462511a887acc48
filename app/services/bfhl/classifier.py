"""Token classification for the BFHL endpoint.

Each token is looked at through its textual form and lands in exactly one
bucket: odd numbers, even numbers, alphabets or special characters.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_DOWN, Context, Decimal
from enum import StrEnum

from app.services.errors import InvalidInputError

NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)\s*", re.ASCII)
ALPHABETIC_RE = re.compile(r"[A-Za-z]+", re.ASCII)
# arithmetic on numbers of any length stays exact
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


class TokenKind(StrEnum):
    ODD = "odd"
    EVEN = "even"
    ALPHABETIC = "alphabetic"
    SPECIAL = "special"


@dataclass
class ClassificationResult:
    odd_numbers: list[str] = field(default_factory=list)
    even_numbers: list[str] = field(default_factory=list)
    alphabets: list[str] = field(default_factory=list)
    special_characters: list[str] = field(default_factory=list)
    sum: str = "0"
    concat_string: str = ""


def is_letter(char: str) -> bool:
    return len(char) == 1 and ALPHABETIC_RE.fullmatch(char) is not None


def parse_number(token: str) -> Decimal | None:
    """Integer value of a numeric token, truncated toward zero.

    Returns ``None`` when the token is not an integer or decimal literal.
    """
    if NUMBER_RE.fullmatch(token) is None:
        return None
    return Decimal(token.strip()).to_integral_value(rounding=ROUND_DOWN)


def classify_token(token: str) -> tuple[TokenKind, str, Decimal | None]:
    """Return the bucket for a token, the value stored there and its number."""
    number = parse_number(token)
    if number is not None:
        kind = TokenKind.EVEN if EXACT.remainder(number, 2) == 0 else TokenKind.ODD
        return kind, token, number
    if ALPHABETIC_RE.fullmatch(token):
        return TokenKind.ALPHABETIC, token.upper(), None
    if len(token) == 1 and not token.isdigit() and not is_letter(token):
        return TokenKind.SPECIAL, token, None
    # mixed content is kept whole, never split into characters
    if all(is_letter(char) for char in token):
        return TokenKind.ALPHABETIC, token.upper(), None
    return TokenKind.SPECIAL, token, None


def transform(alphabets: Iterable[str]) -> str:
    """Reverse every letter of ``alphabets`` and alternate the case.

    >>> transform(["A", "R"])
    'Ra'
    """
    letters = [char.lower() for token in alphabets for char in token if is_letter(char)]
    letters.reverse()
    return "".join(
        char.upper() if index % 2 == 0 else char.lower()
        for index, char in enumerate(letters)
    )


def classify(tokens: Sequence[str]) -> ClassificationResult:
    if not isinstance(tokens, Sequence) or isinstance(tokens, (str, bytes)):
        raise InvalidInputError()

    result = ClassificationResult()
    buckets = {
        TokenKind.ODD: result.odd_numbers,
        TokenKind.EVEN: result.even_numbers,
        TokenKind.ALPHABETIC: result.alphabets,
        TokenKind.SPECIAL: result.special_characters,
    }
    total = Decimal(0)
    for token in tokens:
        kind, value, number = classify_token(token)
        buckets[kind].append(value)
        if number is not None:
            total = EXACT.add(total, number)

    result.sum = f"{total:f}"
    result.concat_string = transform(result.alphabets)
    return result
