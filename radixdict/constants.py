"""Fixed tables shared across the radixdict package."""

from __future__ import annotations

import string

# Keys are drawn from exactly these letters.
ALPHABET: str = string.ascii_lowercase
ALPHABET_SIZE: int = len(ALPHABET)

# Joins compressed-trie segments in get_sequence() output ("ca-t").
SEGMENT_SEPARATOR: str = "-"

# Text form of an absent result when comparing against script literals.
ABSENT_TEXT: str = "null"

# Directory runs pick up script files with this suffix.
SCRIPT_SUFFIX: str = ".txt"
