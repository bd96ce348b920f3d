import pytest
from hypothesis import given
from hypothesis import strategies as st

from blparse.bl_constants import CONDITION_NAMES, END_OF_INPUT, KEYWORDS
from blparse.bl_tokenizer import (
    CharacterStream,
    Tokenizer,
    is_condition,
    is_identifier,
    is_keyword,
    tokens,
)


def test_tokens_simple_if() -> None:
    assert list(tokens("IF next-is-empty THEN move END IF")) == [
        "IF",
        "next-is-empty",
        "THEN",
        "move",
        "END",
        "IF",
        END_OF_INPUT,
    ]


def test_tokens_empty_source() -> None:
    assert list(tokens("")) == [END_OF_INPUT]


def test_tokens_whitespace_and_newlines() -> None:
    assert list(tokens("  WHILE\ttrue\n\nDO\r\n  move  END WHILE ")) == [
        "WHILE",
        "true",
        "DO",
        "move",
        "END",
        "WHILE",
        END_OF_INPUT,
    ]


def test_tokens_skip_comments() -> None:
    source = "# leading comment\nmove # trailing\n# last line without newline"
    assert list(tokens(source)) == ["move", END_OF_INPUT]


def test_tokens_symbols_are_single_char_tokens() -> None:
    assert list(tokens("move;turn(")) == ["move", ";", "turn", "(", END_OF_INPUT]


def test_character_stream_tracks_lines() -> None:
    cs = CharacterStream("a\nb")
    assert cs.next() == "a"
    assert cs.next() == "\n"
    assert (cs.line, cs.column) == (2, 1)
    assert cs.peek() == "b"
    cs.next()
    assert cs.end_of_file()
    assert cs.peek() == ""


def test_character_stream_read_past_end() -> None:
    cs = CharacterStream("")
    with pytest.raises(EOFError, match="past end of source"):
        cs.next()


def test_tokenizer_returns_none_at_end() -> None:
    tokenizer = Tokenizer(CharacterStream("   # only a comment"))
    assert tokenizer.next_token() is None


@pytest.mark.parametrize("word", sorted(KEYWORDS))  # type: ignore[misc]
def test_keywords_are_not_identifiers(word: str) -> None:
    assert is_keyword(word)
    assert not is_identifier(word)


@pytest.mark.parametrize("word", CONDITION_NAMES)  # type: ignore[misc]
def test_conditions_are_not_identifiers(word: str) -> None:
    assert is_condition(word)
    assert not is_identifier(word)


@pytest.mark.parametrize(  # type: ignore[misc]
    "word,expected",
    [
        ("move", True),
        ("turn-left", True),
        ("x1", True),
        ("If", True),
        ("1abc", False),
        ("-move", False),
        ("", False),
        ("a_b", False),
        (";", False),
        (END_OF_INPUT, False),
    ],
)
def test_is_identifier(word: str, expected: bool) -> None:
    assert is_identifier(word) is expected


def test_lowercase_keyword_is_identifier() -> None:
    assert not is_keyword("if")
    assert is_identifier("if")


@given(
    words=st.lists(
        st.from_regex(r"[a-zA-Z][a-zA-Z0-9-]{0,8}", fullmatch=True), max_size=10
    )
)  # type: ignore[misc]
def test_tokens_splits_on_whitespace(words: list[str]) -> None:
    result = tokens("\n ".join(words))
    assert list(result) == words + [END_OF_INPUT]
