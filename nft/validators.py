"""
NFT Collection Wizard - Input Validators

Pure checks applied to raw answer text before it reaches the schema builder.
Each validator returns the text unchanged or raises InputFormatError.
"""

import re
from typing import Callable

from .exceptions import InputFormatError, InternalInconsistencyError

ADDRESS_LENGTH = 20

_UNSIGNED_PATTERN = re.compile(r'[0-9]+')

Validator = Callable[[str], str]


def validate_text(text: str) -> str:
    """Accept any text."""
    if not is_valid_text(text):
        raise InputFormatError(f"Couldn't parse input of '{text}' to text.")
    return text


def validate_number(text: str) -> str:
    """Accept text that is a non-negative base-10 integer."""
    if not is_valid_number(text):
        raise InputFormatError(f"Couldn't parse input of '{text}' to a number.")
    return text


def validate_address(text: str) -> str:
    """Accept text whose UTF-8 encoding is exactly 20 bytes long."""
    if not is_valid_address(text):
        raise InputFormatError(f"Couldn't parse input of '{text}' to an address.")
    return text


def is_valid_text(text: str) -> bool:
    return True


def is_valid_number(text: str) -> bool:
    return bool(_UNSIGNED_PATTERN.fullmatch(text))


def is_valid_address(text: str) -> bool:
    # Undecodable terminal bytes arrive as surrogate escapes
    try:
        encoded = text.encode('utf-8', 'surrogateescape')
    except UnicodeEncodeError:
        return False
    return len(encoded) == ADDRESS_LENGTH


def parse_unsigned(text: str) -> int:
    """
    Parse numeric text that has already passed validate_number.

    Raises:
        InternalInconsistencyError: If the text does not parse, which means
            the validator and this parser disagree
    """
    if not is_valid_number(text):
        raise InternalInconsistencyError(
            f"Failed to parse '{text}' as an unsigned integer after it passed validation"
        )
    return int(text)
