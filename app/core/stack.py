# app/core/stack.py
"""
Stack tags are kept in a single text column, joined with commas.
"""

from typing import List

STACK_DELIMITER = ","


def encode_stack(items: List[str]) -> str:
    return STACK_DELIMITER.join(items)


def decode_stack(text: str) -> List[str]:
    # An empty column means no tags, not one empty tag
    if not text:
        return []
    return text.split(STACK_DELIMITER)
