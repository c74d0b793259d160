"""Unit tests for quote(), join() and validate_roundtrip()."""

from __future__ import annotations

import pytest

from shellsplit import Config, join, quote, split, split_with_config, validate_roundtrip
from shellsplit import quoting

# ============================================================================
#                               quote()
# ============================================================================


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        # empty
        ("", "''"),
        # nothing unsafe
        ("ls", "ls"),
        ("-la", "-la"),
        ("file.txt", "file.txt"),
        ("a=b,c:d@e+f%g", "a=b,c:d@e+f%g"),
        ("héllo", "héllo"),
        # single quotes
        ("file name.txt", "'file name.txt'"),
        ("#", "'#'"),
        ("a\\b", "'a\\b'"),
        ('say "hi"', "'say \"hi\"'"),
        ("$HOME", "'$HOME'"),
        ("*.txt", "'*.txt'"),
        ("a|b", "'a|b'"),
        ("tab\there", "'tab\there'"),
        # double quotes
        ("it's", '"it\'s"'),
        ("it's\\", '"it\'s\\\\"'),
        # both quote kinds
        ("it's \"x\"", "'it'\\''s \"x\"'"),
        ("'\"", "''\\''\"'"),
    ],
)
def test_quote(word, expected):
    """quote() picks the least noisy safe quoting."""
    assert quote(word) == expected


@pytest.mark.parametrize(
    "word",
    ["", "plain", "two words", "it's", 'say "hi"', "it's \"x\"", "\\", "#!", "a\nb"],
)
def test_quote_splits_back_to_one_word(word):
    """Splitting a quoted word gives back exactly that word."""
    assert split(quote(word)) == [word]


def test_quote_uses_configured_characters():
    """quote() quotes with the configuration's own characters."""
    cfg = Config(single_quote="%", double_quote="@", escape_char="^", comment_char=";")
    assert quote("a b", cfg) == "%a b%"
    assert quote("a%b", cfg) == "@a%b@"
    assert quote("a%b^@", cfg) == "%a%^%%b^@%"
    assert split_with_config(quote("a%b^@", cfg), cfg) == ["a%b^@"]


def test_quote_custom_unsafe_chars():
    """Characters listed in unsafe_chars force quoting."""
    cfg = Config(unsafe_chars="=")
    assert quote("a=b", cfg) == "'a=b'"
    assert quote("$x", cfg) == "$x"


# ============================================================================
#                               join()
# ============================================================================


def test_join_empty():
    """Joining no words gives an empty string."""
    assert join([]) == ""


def test_join_example():
    """Words are quoted independently and separated by one space."""
    line = join(["ls", "-la", "file name.txt"])
    assert line == "ls -la 'file name.txt'"
    assert split(line) == ["ls", "-la", "file name.txt"]


def test_join_keeps_empty_words():
    """Empty words survive as '' so the word count is preserved."""
    assert join(["a", "", "b"]) == "a '' b"


def test_join_accepts_iterables():
    """join() accepts any iterable of strings."""
    assert join(w for w in ("x", "y z")) == "x 'y z'"


def test_join_separator_is_plain_space():
    """The separator is a space whatever the configured whitespace."""
    cfg = Config(whitespace=" \t,")
    assert join(["a", "b,c"], cfg) == "a 'b,c'"


# ============================================================================
#                               validate_roundtrip()
# ============================================================================


@pytest.mark.parametrize(
    "words",
    [
        [],
        [""],
        ["ls", "-la", "file name.txt"],
        ["echo", "it's", 'say "hi"', "it's \"x\""],
        ["#", "# comment", "a#b"],
        ["\\", "\\\\", "a\\", "\\'"],
        ["line\nbreak", "cr\rlf", "\t"],
        ["$HOME", "`id`", "*", "~"],
        ["ü", "🐍 🐍", "日本語"],
    ],
)
def test_validate_roundtrip(words, preset_config):
    """join followed by split is the identity under every preset."""
    assert validate_roundtrip(words, preset_config)


def test_validate_roundtrip_default_config():
    """Without a config the default preset is used."""
    assert validate_roundtrip(("a b", "c"))


def test_validate_roundtrip_detects_mismatch(monkeypatch):
    """A quoting that does not protect whitespace fails the round trip."""
    monkeypatch.setattr(quoting, "quote", lambda word, config=None: word)
    assert validate_roundtrip(["a b"]) is False


def test_validate_roundtrip_detects_split_error(monkeypatch):
    """A quoting that produces unbalanced quotes fails the round trip."""
    monkeypatch.setattr(quoting, "quote", lambda word, config=None: word)
    assert validate_roundtrip(["it's"]) is False


def test_roundtrip_with_newline_escape_char():
    """A newline escape character survives quoting inside double quotes."""
    cfg = Config(escape_char="\n", whitespace=" \t")
    assert quote("it's\n", cfg) == "\"it's\n\n\""
    assert validate_roundtrip(["it's\n"], cfg)
