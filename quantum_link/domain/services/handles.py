"""
Quantum ID (handle) rules.

- generate_candidate: "<base>-<4 digits>" where base is the alphanumeric,
  lower-cased part of the seed before "@" (or a fallback literal).
- validate_handle: user-chosen handles need a minimum length and a minimum
  number of digits after trimming. Comparison elsewhere is exact and
  case-sensitive; nothing here normalizes case.
- normalize_handle_query: the search box accepts "@handle".
"""

import random
import re
import string
from dataclasses import dataclass
from typing import Optional

DEFAULT_FALLBACK_BASE = "user"
DEFAULT_SEPARATOR = "-"
DEFAULT_MIN_LENGTH = 6
DEFAULT_MIN_DIGITS = 4

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class HandleValidation:
    ok: bool
    value: Optional[str] = None
    message: Optional[str] = None


def handle_rules_message(
    min_length: int = DEFAULT_MIN_LENGTH, min_digits: int = DEFAULT_MIN_DIGITS
) -> str:
    return (
        f"Your quantum ID must be at least {min_length} characters "
        f"and include at least {min_digits} numbers."
    )


def generate_candidate(
    seed: Optional[str],
    rng: Optional[random.Random] = None,
    fallback: str = DEFAULT_FALLBACK_BASE,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    rng = rng or random
    core = (seed or fallback).split("@")[0]
    core = _NON_ALNUM.sub("", core).lower() or fallback
    suffix = rng.randint(1000, 9999)
    return f"{core}{separator}{suffix}"


def validate_handle(
    raw: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    min_digits: int = DEFAULT_MIN_DIGITS,
) -> HandleValidation:
    trimmed = (raw or "").strip()
    digit_count = sum(1 for ch in trimmed if ch in string.digits)
    if len(trimmed) < min_length or digit_count < min_digits:
        return HandleValidation(
            ok=False, message=handle_rules_message(min_length, min_digits)
        )
    return HandleValidation(ok=True, value=trimmed)


def normalize_handle_query(raw: str) -> str:
    trimmed = (raw or "").strip()
    return trimmed[1:] if trimmed.startswith("@") else trimmed
