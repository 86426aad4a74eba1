"""US N-number codec — ICAO address <-> tail number, both directions.

US civil addresses encode the registration directly: the offset from 0xA00000
is the rank of the tail number in the ordering of all legal N-numbers, so the
mapping is pure arithmetic rather than a registry lookup.

The ordering is a mixed-radix count. Each digit position owns a bucket holding
every registration that starts with it; a bucket is the digit itself, then a
letter suffix zone (601 entries), then ten sub-buckets for the next digit:

- bucket 1 = 101711  (10 * 10111 + 601)  leading digit 1-9
- bucket 2 = 10111   (10 * 951 + 601)
- bucket 3 = 951     (10 * 35 + 601)
- bucket 4 = 35      (bare + 24 letters + 10 digits, no suffix zone)

0xA00000 is bare "N", 0xA00001 is N1 and 0xADF7C7 is N99999.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .icao import ICAO_SIZE, US_START, is_military, parse_icao

logger = logging.getLogger(__name__)

N_NUMBER_MAX_SIZE = 6  # "N" + up to 5 characters

LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"  # No I or O
DIGITS = "0123456789"
ALPHANUMERIC = LETTERS + DIGITS

# Letter suffixes: none, 24 single letters, 24 * 24 pairs
SUFFIX_SIZE = 1 + len(LETTERS) * (1 + len(LETTERS))  # 601

BUCKET4_SIZE = 1 + len(LETTERS) + len(DIGITS)  # 35
BUCKET3_SIZE = len(DIGITS) * BUCKET4_SIZE + SUFFIX_SIZE  # 951
BUCKET2_SIZE = len(DIGITS) * BUCKET3_SIZE + SUFFIX_SIZE  # 10111
BUCKET1_SIZE = len(DIGITS) * BUCKET2_SIZE + SUFFIX_SIZE  # 101711

_BUCKETS = (BUCKET1_SIZE, BUCKET2_SIZE, BUCKET3_SIZE, BUCKET4_SIZE)


@dataclass(frozen=True)
class Conversion:
    """Result of a conversion: the converted identifier, or why it failed."""

    value: str | None = None
    error: str | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Conversion needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: str) -> Conversion:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> Conversion:
        return cls(error=error)


def _reject(kind: str, text: str, reason: str) -> Conversion:
    logger.debug("Rejected %s %r: %s", kind, text, reason)
    return Conversion.failure(reason)


def get_suffix(offset: int) -> str:
    """Letter suffix at a position in the suffix zone (0..600).

    0 is no suffix. After that each first letter comes bare, then followed
    by each of the 24 second letters: 1 -> "A", 2 -> "AA", ..., 25 -> "AZ",
    26 -> "B", ..., 600 -> "ZZ".
    """
    if offset == 0:
        return ""
    first_idx, second_rem = divmod(offset - 1, len(LETTERS) + 1)
    if second_rem == 0:
        return LETTERS[first_idx]
    return LETTERS[first_idx] + LETTERS[second_rem - 1]


def suffix_offset(suffix: str) -> int | None:
    """Position of a 0-2 letter suffix in the suffix zone (inverse of get_suffix).

    Returns None if the suffix is longer than two characters or holds
    anything other than N-number letters.
    """
    if not suffix:
        return 0
    if len(suffix) > 2 or any(c not in LETTERS for c in suffix):
        logger.debug("Invalid letter suffix %r", suffix)
        return None

    count = (len(LETTERS) + 1) * LETTERS.index(suffix[0]) + 1
    if len(suffix) == 2:
        count += LETTERS.index(suffix[1]) + 1
    return count


def _index_to_body(index: int) -> str:
    """Registration characters after the "N" for a sequence index."""
    body = ""
    for level, bucket in enumerate(_BUCKETS[:-1]):
        digit, remainder = divmod(index, bucket)
        if level == 0:
            digit += 1  # Leading digit is never 0
        body += str(digit)

        if remainder < SUFFIX_SIZE:
            return body + get_suffix(remainder)
        index = remainder - SUFFIX_SIZE

    # Fourth digit, then at most one trailing letter or digit
    digit, remainder = divmod(index, BUCKET4_SIZE)
    body += str(digit)
    if remainder == 0:
        return body
    return body + ALPHANUMERIC[remainder - 1]


def _body_to_value(body: str) -> int | None:
    """Offset from 0xA00000 for the characters after the "N".

    The empty body is bare "N" (offset 0); anything else is its sequence
    index + 1. Returns None if a letter run is not a valid suffix.
    """
    if not body:
        return 0

    value = 1
    for i, c in enumerate(body):
        if i == N_NUMBER_MAX_SIZE - 2:
            # 5th character: last position, any letter or digit
            value += ALPHANUMERIC.index(c) + 1
            break
        if c in LETTERS:
            # Letters end the registration
            offset = suffix_offset(body[i:])
            if offset is None:
                return None
            value += offset
            break
        if i == 0:
            value += (int(c) - 1) * BUCKET1_SIZE
        else:
            value += int(c) * _BUCKETS[i] + SUFFIX_SIZE
    return value


def _create_icao(value: int) -> str | None:
    """Render an offset as "A" + 5 hex digits, or None if it needs more."""
    digits = f"{value:X}"
    if len(digits) > ICAO_SIZE - 1:
        return None
    return "A" + digits.rjust(ICAO_SIZE - 1, "0")


def icao_to_tail(icao: str) -> Conversion:
    """Convert a US ICAO address (e.g. "A061D9", any case) to its N-number.

    Fails for anything that is not six hex characters starting with "A",
    and for the military block above N99999.
    """
    icao = icao.upper()
    if len(icao) != ICAO_SIZE:
        return _reject("ICAO address", icao, f"expected {ICAO_SIZE} characters, got {len(icao)}")
    if icao[0] != "A":
        return _reject("ICAO address", icao, "not a US address (must start with 'A')")

    addr = parse_icao(icao)
    if addr is None:
        return _reject("ICAO address", icao, "contains non-hex characters")
    if is_military(addr):
        return _reject("ICAO address", icao, "in the US military block, no N-number")

    index = addr - US_START - 1
    if index < 0:
        return Conversion.success("N")
    return Conversion.success("N" + _index_to_body(index))


def tail_to_icao(tail: str) -> Conversion:
    """Convert a canonical N-number (e.g. "N12345") to its ICAO address.

    The tail must be uppercase: "N", a leading digit 1-9, up to three more
    digits, then either a 1-2 letter suffix or a single fifth character.
    """
    if not (0 < len(tail) <= N_NUMBER_MAX_SIZE):
        return _reject("tail number", tail, f"expected 1-{N_NUMBER_MAX_SIZE} characters, got {len(tail)}")
    if tail[0] != "N":
        return _reject("tail number", tail, "must start with 'N'")

    body = tail[1:]
    if any(c not in ALPHANUMERIC for c in body):
        return _reject("tail number", tail, "contains characters outside A-Z (no I/O) and 0-9")

    # Only the last two characters may be letters
    if len(tail) > 3 and any(c in LETTERS for c in tail[1:len(tail) - 2]):
        return _reject("tail number", tail, "letters are only allowed at the end")

    if body and body[0] not in DIGITS[1:]:
        return _reject("tail number", tail, "must start with a digit 1-9 after 'N'")

    value = _body_to_value(body)
    if value is None:
        return _reject("tail number", tail, "invalid letter suffix")

    icao = _create_icao(value)
    if icao is None:
        return _reject("tail number", tail, "value out of range for a US address")
    return Conversion.success(icao)
