# lambda/vanity_connect/vanity.py
from __future__ import annotations
import re
from typing import List, Optional

PHONE_LENGTH = 10

# -------------------- T9 maps -----------------------
# Keypad data kept alongside the generator; generate_vanity_numbers does not
# consult it (no dictionary scoring yet).
T9_LETTERS = {
    "2": "ABC", "3": "DEF", "4": "GHI", "5": "JKL",
    "6": "MNO", "7": "PQRS", "8": "TUV", "9": "WXYZ"
}
LETTER_TO_DIGIT = {ch: d for d, letters in T9_LETTERS.items() for ch in letters}

CANDIDATE_WORDS = (
    "CALL", "HELP", "HOME", "SALE", "DEAL", "PIZZA", "TECH",
    "CLOUD", "AWS", "SERVICE", "SUPPORT", "COACH", "LEGAL", "QUOTE",
)

# Fixed suffixes, in the order they are offered to the caller
VANITY_SUFFIXES = ("CALL", "HELP", "AWSX")

_NON_DIGIT = re.compile(r"\D", re.ASCII)


def normalize_phone(raw: Optional[str]) -> Optional[str]:
    """
    Reduce a caller-supplied phone string to a 10-digit local number.

    Every non-digit is dropped and the *last* 10 digits are kept, so a leading
    country code ("+1", "1", ...) falls away. Returns None when fewer than 10
    digits are left.
    """
    digits = _NON_DIGIT.sub("", raw or "")
    if len(digits) < PHONE_LENGTH:
        return None
    return digits[-PHONE_LENGTH:]


def _blocks(phone: str):
    return phone[:3], phone[3:6], phone[6:]


# -------------------- Main API --------------------
def generate_vanity_numbers(phone: str) -> List[str]:
    """
    Return the five vanity options for a normalized number, best first:
    the three fixed word suffixes, the hyphenated number and the bare number.
    """
    area, prefix, line = _blocks(phone)
    options = [f"{area}-{prefix}-{suffix}" for suffix in VANITY_SUFFIXES]
    options.append(f"{area}-{prefix}-{line}")
    options.append(phone)
    return options
