# lambda/vanity_connect/speech.py
import re
import string
from typing import Sequence

PAUSE = '<break time="200ms"/>'
_WHITESPACE = re.compile(r"\s+")

ORDINALS = ("one", "two", "three")


def _speak_char(ch: str) -> str:
    if ch in string.digits:
        return f"{ch} "  # read digits one at a time, not as a number
    if ch == "-":
        return f" {PAUSE} "
    return ch


def spell_out(s: str) -> str:
    """Render a vanity option so Connect reads digits singly and pauses on hyphens."""
    spoken = "".join(_speak_char(ch) for ch in s)
    return _WHITESPACE.sub(" ", spoken).strip()


def speech_text(options: Sequence[str]) -> str:
    top = list(options[:3]) + [""] * (3 - len(options[:3]))
    clauses = [f"Option {n}: {spell_out(opt)}." for n, opt in zip(ORDINALS, top)]
    return (
        "Here are your top three vanity number options. "
        + " ".join(clauses)
        + " Thank you for calling. Goodbye."
    )
