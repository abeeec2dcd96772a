import hashlib
from collections import Counter

from .records import StringProperties

# Every property is computed over Unicode code points (Python str elements).


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash of the UTF-8 encoded string, as lowercase hex."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads exactly the same forward and backward."""
    return value == value[::-1]


def count_words(value: str) -> int:
    """Count whitespace-delimited tokens; an all-whitespace string has none."""
    return len(value.split())


def character_frequency(value: str) -> dict:
    return dict(Counter(value))


def analyze_string(value: str) -> StringProperties:
    """Compute all derived properties of the string."""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=character_frequency(value),
    )
