from typing import Callable, Iterable, List, Tuple

import django_filters
from django import forms

from .models import StringRecord
from .records import AnalyzedString, StringFilters


Predicate = Callable[[AnalyzedString, object], bool]

# filter name -> match rule; a record must satisfy every supplied filter
MATCH_RULES: Tuple[Tuple[str, Predicate], ...] = (
    ('is_palindrome', lambda rec, val: rec.properties.is_palindrome == val),
    ('min_length', lambda rec, val: rec.properties.length >= val),
    ('max_length', lambda rec, val: rec.properties.length <= val),
    ('word_count', lambda rec, val: rec.properties.word_count == val),
    ('contains_character', lambda rec, val: val in rec.value),
)


def matches(record: AnalyzedString, filters: StringFilters) -> bool:
    for name, rule in MATCH_RULES:
        expected = getattr(filters, name)
        if expected is not None and not rule(record, expected):
            return False
    return True


def apply_filters(records: Iterable[AnalyzedString], filters: StringFilters) -> List[AnalyzedString]:
    """Return the records matching all supplied filters, keeping input order."""
    return [record for record in records if matches(record, filters)]


class IntegerFilter(django_filters.NumberFilter):
    field_class = forms.IntegerField


class StringRecordFilter(django_filters.FilterSet):
    """
    Parses and validates the list endpoint's query parameters.

    ``is_palindrome`` is true only for the literal ``"true"``; any other
    supplied value means false.
    """
    is_palindrome = django_filters.CharFilter()
    min_length = IntegerFilter(min_value=0)
    max_length = IntegerFilter(min_value=0)
    word_count = IntegerFilter(min_value=0)
    contains_character = django_filters.CharFilter(strip=False)

    class Meta:
        model = StringRecord
        fields = []

    def to_filters(self) -> StringFilters:
        data = self.form.cleaned_data
        is_palindrome = None
        if 'is_palindrome' in self.data:
            is_palindrome = self.data.get('is_palindrome') == 'true'
        return StringFilters(
            is_palindrome=is_palindrome,
            min_length=data.get('min_length'),
            max_length=data.get('max_length'),
            word_count=data.get('word_count'),
            contains_character=data.get('contains_character') or None,
        )
