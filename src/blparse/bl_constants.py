"""
Shared lexicon for the BL language.

Exports:
    END_OF_INPUT: Sentinel token that terminates every token stream.
    KEYWORDS: Reserved words of the statement grammar.
    BLOCK_TERMINATORS: Tokens that end a block without being consumed by it.
    CONDITION_NAMES: Raw (lowercase, hyphenated) condition tokens.
"""

END_OF_INPUT = "### END OF INPUT ###"

KEYWORDS: frozenset[str] = frozenset({"IF", "THEN", "ELSE", "END", "WHILE", "DO"})

BLOCK_TERMINATORS: frozenset[str] = frozenset({"END", "ELSE", END_OF_INPUT})

CONDITION_NAMES: tuple[str, ...] = (
    "next-is-empty",
    "next-is-not-empty",
    "next-is-wall",
    "next-is-not-wall",
    "next-is-friend",
    "next-is-not-friend",
    "next-is-enemy",
    "next-is-not-enemy",
    "random",
    "true",
)
