"""Normalization of class-type codes written in week cells."""

from .constants import CLASS_TYPE_NAMES
from .utils import collapse_spaces


def clean_class_type(raw: str) -> str:
    """Trim a raw class-type code and flatten its whitespace.

    Codes are typed by hand, often across two lines of a merged cell, so
    "Л\\n/ПЗ" and "Л  /ПЗ" both turn into single-spaced text.

    Args:
        raw: Cell text

    Returns:
        Cleaned code
    """
    return collapse_spaces(raw.strip())


def is_known_class_type(code: str) -> bool:
    return code in CLASS_TYPE_NAMES


def normalize_class_type(code: str) -> str:
    """Map a cleaned class-type code to its full name.

    Args:
        code: Cleaned code, e.g. "ПЗ"

    Returns:
        Full name, or the code itself if it is not in the table
    """
    return CLASS_TYPE_NAMES.get(code, code)
