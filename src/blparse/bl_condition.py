"""
Condition translator for BL.

A condition appears in source as a lowercase, hyphen-separated token such as
`next-is-empty`. `parse_condition` maps it onto the closed `Condition`
enumeration, whose member names are the canonical uppercase, underscore-separated
spelling (`NEXT_IS_EMPTY`).

Example:
    >>> parse_condition("next-is-not-wall")
    <Condition.NEXT_IS_NOT_WALL: 'next-is-not-wall'>
"""

from enum import Enum

from blparse.bl_errors import BLSyntaxError, ErrorKind
from blparse.bl_tokenizer import is_condition


class Condition(Enum):
    """Named boolean conditions of the BL vocabulary, valued by their raw token."""

    NEXT_IS_EMPTY = "next-is-empty"
    NEXT_IS_NOT_EMPTY = "next-is-not-empty"
    NEXT_IS_WALL = "next-is-wall"
    NEXT_IS_NOT_WALL = "next-is-not-wall"
    NEXT_IS_FRIEND = "next-is-friend"
    NEXT_IS_NOT_FRIEND = "next-is-not-friend"
    NEXT_IS_ENEMY = "next-is-enemy"
    NEXT_IS_NOT_ENEMY = "next-is-not-enemy"
    RANDOM = "random"
    TRUE = "true"

    def to_token(self) -> str:
        return self.value


def parse_condition(raw: str) -> Condition:
    """Translate a raw condition token into its `Condition`.

    Args:
        raw: A token accepted by `is_condition`.

    Returns:
        The matching `Condition` member.

    Raises:
        BLSyntaxError: UNKNOWN_CONDITION if no member matches the canonical form.
    """
    assert is_condition(raw), f"Violation of: {raw!r} is a condition string"

    canonical = raw.replace("-", "_").upper()
    try:
        return Condition[canonical]
    except KeyError as e:
        raise BLSyntaxError(
            ErrorKind.UNKNOWN_CONDITION,
            f"Unknown condition: {raw}",
            token=raw,
        ) from e
