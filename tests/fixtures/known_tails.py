"""Known ICAO address / N-number pairs.

The pairs follow from the bucket arithmetic; N12345 and N78888 are
widely used reference values for the US address block.
"""

# Format: (tail_number, icao)
KNOWN_PAIRS = [
    ("N", "A00000"),        # Bare "N", base of the block
    ("N1", "A00001"),       # First registration
    ("N1A", "A00002"),      # First single-letter suffix
    ("N1AA", "A00003"),     # First two-letter suffix
    ("N1Z", "A00241"),
    ("N1ZZ", "A00259"),     # Last suffix after one digit
    ("N10", "A0025A"),      # First two-digit registration
    ("N100", "A004B3"),
    ("N1000", "A0070C"),
    ("N1000A", "A0070D"),   # Fifth character, letter
    ("N1000Z", "A00724"),
    ("N10000", "A00725"),   # Fifth character, digit
    ("N1001", "A0072F"),
    ("N12345", "A061D9"),
    ("N78888", "AAB1CF"),
    ("N9", "AC6A79"),       # First registration under leading digit 9
    ("N99999", "ADF7C7"),   # Last US civil address
]

# US military block, no registration
MILITARY_ADDRESSES = ["ADF7C8", "AE0000", "AFFFFF"]
