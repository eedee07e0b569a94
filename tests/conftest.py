"""Pytest configuration and fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def animal_words():
    """Small word set with shared prefixes."""
    return {
        "cat": "feline",
        "car": "vehicle",
        "cart": "a small wagon",
        "dog": "canine",
        "do": "perform",
        "zebra": "striped horse",
    }


@pytest.fixture
def random_words():
    """Seeded random words over a narrow alphabet so prefixes collide."""
    rng = random.Random(1234)
    words = {}
    for i in range(300):
        length = rng.randint(1, 7)
        word = "".join(rng.choice("abcde") for _ in range(length))
        words[word] = f"def {i}"
    return words


@pytest.fixture
def scenario_script():
    """Script text for the cat/car scenario."""
    return """13
1 cat feline
1 car vehicle
4 ca 2
3 cat feline
6 cat null
5
6 cat ca-t
6 car ca-r
4 ca 2
4 c 2
4 cab 0
3 ca null
5
"""
