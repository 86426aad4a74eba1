"""ICAO address handling — normalisation, parsing, US block classification.

Every aircraft has a unique 24-bit ICAO address assigned by country of registration.
The United States holds 0xA00000-0xAFFFFF:
- 0xA00000-0xADF7C7: civil N-number space ("N" through "N99999")
- 0xADF7C8-0xAFFFFF: military, not derived from any registration
"""

from __future__ import annotations

ICAO_SIZE = 6  # hex characters in a rendered address
ICAO_MAX = 0xFFFFFF

HEX_DIGITS = "0123456789ABCDEF"

# US allocation
US_START = 0xA00000
US_END = 0xAFFFFF

# Last address reachable from an N-number (N99999)
US_N_NUMBER_END = 0xADF7C7

US_MILITARY_START = 0xADF7C8
US_MILITARY_END = US_END


def normalize_icao(text: str) -> str:
    """Strip whitespace and an optional 0x prefix, uppercase the rest."""
    text = text.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    return text.upper()


def parse_icao(icao_hex: str) -> int | None:
    """Parse a 6-character hex address (either case).

    Returns the 24-bit integer, or None if the string is not exactly
    six hex digits.
    """
    if len(icao_hex) != ICAO_SIZE:
        return None
    if any(c not in HEX_DIGITS for c in icao_hex.upper()):
        return None
    return int(icao_hex, 16)


def format_icao(addr: int) -> str | None:
    """Render an address as 6 uppercase hex characters, or None if not 24-bit."""
    if not (0 <= addr <= ICAO_MAX):
        return None
    return f"{addr:06X}"


def is_us_address(addr: int) -> bool:
    return US_START <= addr <= US_END


def is_n_number_address(addr: int) -> bool:
    """True if the address encodes a US civil registration (including bare "N")."""
    return US_START <= addr <= US_N_NUMBER_END


def is_military(addr: int) -> bool:
    """True if the address falls in the US military allocation block."""
    return US_MILITARY_START <= addr <= US_MILITARY_END
