import re
import unicodedata
from typing import Any

_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def clean_string(value: str) -> str:
    """Strip accents and anything that is not a letter, digit, space or hyphen."""
    decomposed = unicodedata.normalize("NFD", value)
    cleaned = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # NFD already splits ñ into n + tilde; kept for precomposed leftovers
    cleaned = cleaned.replace("ñ", "n").replace("Ñ", "N")
    cleaned = _DISALLOWED.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned.strip())


def clean_strings(value: Any) -> Any:
    if isinstance(value, str):
        return clean_string(value)
    if isinstance(value, dict):
        return {key: clean_strings(item) for key, item in value.items()}
    if isinstance(value, list):
        return [clean_strings(item) for item in value]
    return value
