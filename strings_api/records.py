"""
Typed, immutable records shared by the analyzer, the query engine and the
storage layer.
"""
from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalyzedString:
    """A stored string together with its derived properties."""
    id: str
    value: str
    properties: StringProperties
    created_at: datetime


@dataclass(frozen=True)
class StringFilters:
    """
    Structured filter values for one request. ``None`` means the filter
    was not supplied and imposes no constraint.
    """
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def applied(self) -> dict:
        # only the filters that were actually set
        return {k: v for k, v in asdict(self).items() if v is not None}

    def is_empty(self) -> bool:
        return not self.applied()
