# holdings_engine/shared/utils/text_utils.py

"""Text helpers for display strings and natural ordering"""

# Standard library imports
from re import compile

_DIGIT_RUNS = compile(r"(\d+)")

type NaturalKey = list[str | int]


def natural_key(text: str) -> NaturalKey:
    """Split text into alternating string and integer parts

    Digit runs compare by numeric value, so "no. 9" sorts before "no. 10".
    Parts at even positions are always strings and parts at odd positions are
    always integers, which keeps two keys comparable element by element.

    Args:
        text: Text to build a key for

    Returns:
        Sort key for the text
    """
    parts: NaturalKey = []
    for index, part in enumerate(_DIGIT_RUNS.split(text or "")):
        parts.append(int(part) if index % 2 else part)
    return parts


def natural_compare(first: str, second: str) -> int:
    """Compare two strings in natural (numeric-aware) order

    Returns:
        -1, 0 or 1
    """
    first_key = natural_key(first)
    second_key = natural_key(second)
    if first_key == second_key:
        # Equal numbers written differently ("01" and "1") fall back to plain text
        return (first > second) - (first < second)
    return -1 if first_key < second_key else 1


def join_nonempty(parts: list[str | None], separator: str) -> str:
    """Join the non-empty parts with the separator"""
    return separator.join(part for part in parts if part)


def unique_in_order(values: list[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence"""
    return list(dict.fromkeys(values))
