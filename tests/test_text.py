import pytest

from dsakit.text import is_palindrome, reverse_text


@pytest.mark.parametrize("text", ["", "a", "agent007", "Mirror"])
def test_reverse_text_round_trip(text):
    assert reverse_text(reverse_text(text)) == text


def test_reverse_text_swaps_ends():
    text = "codename"
    result = reverse_text(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]
    assert sorted(result) == sorted(text)


@pytest.mark.parametrize("text", ["", "x", "racecar", "abba"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abca", "Aa"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False


def test_text_joined_with_its_reverse_is_palindrome():
    text = "stack"
    assert is_palindrome(text + reverse_text(text)) is True