"""
String Utilities for namewise.

General-purpose string helpers that do not belong to the case
conversion code.
"""

from __future__ import annotations

import random
import string
from typing import Optional

from .config import get_config


def random_string(length: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random string of uppercase ASCII letters.

    Args:
        length: Number of characters; defaults to the configured
            ``naming.random_string_length`` (8 unless overridden)
        rng: Optional random number generator, for reproducible output

    Returns:
        Random string such as ``"QWHZKDAE"``

    Raises:
        ValueError: If length is negative
    """
    if length is None:
        length = get_config().naming.random_string_length
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    rng = rng or random
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(length))
