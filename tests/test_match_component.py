"""
Tests for single-component wildcard matching.
"""

import random

import pytest

from changed_files.core.matcher import match_component


def naive_match(pattern: str, text: str) -> bool:
    """Plain backtracking, exponential in the worst case."""
    if not pattern:
        return not text
    head = pattern[0]
    if head == "*":
        return any(naive_match(pattern[1:], text[k:]) for k in range(len(text) + 1))
    if not text:
        return False
    if head == "?" or head == text[0]:
        return naive_match(pattern[1:], text[1:])
    return False


@pytest.mark.parametrize(
    "pattern,text,expected",
    [
        ("a*b*c", "a123b456c", True),
        ("a*b*c", "abc", True),
        ("a*b*c", "a123b456c789", False),
        ("a*b*c", "a123d456c", False),
        ("a*b*c", "a123b", False),
        ("*", "anything", True),
        ("*", "", True),
        ("a*", "a", True),
        ("*a", "a", True),
        ("a*b*", "ab", True),
        ("**", "", True),
    ],
)
def test_star(pattern, text, expected):
    assert match_component(pattern, text) is expected


@pytest.mark.parametrize(
    "pattern,text,expected",
    [
        ("a?b", "a1b", True),
        ("a?b", "acb", True),
        ("a?b", "ab", False),
        ("a?b", "abx", False),
        ("a?b?", "a1b2", True),
        ("a?b?", "a1b", False),
        ("a?b?", "a1b2c", False),
        ("?", "", False),
        ("?", "x", True),
    ],
)
def test_question_mark(pattern, text, expected):
    assert match_component(pattern, text) is expected


def test_exact():
    assert match_component("abc", "abc")
    assert not match_component("abc", "abcd")
    assert not match_component("abc", "ab")
    assert not match_component("abc", "abx")
    assert match_component("", "")
    assert not match_component("", "a")
    assert not match_component("a", "")


def test_case_sensitive():
    assert not match_component("readme.md", "README.md")


def test_mixed_wildcards():
    assert match_component("a*b?c", "a123b4c")
    assert not match_component("a*b?c", "a123b456c")
    assert match_component("a*b?c?d*", "a123b4c7d89")
    assert not match_component("a*b?c", "a123b456c789")
    assert match_component("a*b?c*", "a123b4c56")
    assert not match_component("a*b?c*", "a123b456d789")


def test_brackets_and_braces_are_literal():
    assert match_component("[ab].txt", "[ab].txt")
    assert not match_component("[ab].txt", "a.txt")
    assert match_component("{a,b}", "{a,b}")


def test_unicode_characters_count_once():
    assert match_component("e?f", "e⚡f")
    assert match_component("?", "😀")
    assert not match_component("??", "😀")
    assert match_component("*⚡", "abc⚡")


def test_adversarial_input_is_fast():
    pattern = "*a" * 30 + "b"
    text = "a" * 2000
    assert not match_component(pattern, text)


def test_agrees_with_naive_backtracking():
    rng = random.Random(20240611)
    for _ in range(2000):
        # keep the number of "*" small so the reference stays tractable
        pattern = "".join(rng.choice("ab?*") for _ in range(rng.randint(0, 20)))
        while pattern.count("*") > 4:
            pattern = pattern.replace("*", rng.choice("ab?"), 1)
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 20)))
        assert match_component(pattern, text) == naive_match(pattern, text), (pattern, text)
