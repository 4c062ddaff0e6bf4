"""String utilities."""


def reverse_text(text: str) -> str:
    """Return ``text`` with its characters in the opposite order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same in both directions."""
    return text == text[::-1]