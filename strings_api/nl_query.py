"""
Heuristic translation of a free-text phrase into structured filters.

Each rule pairs a regular expression, matched against the lower-cased
phrase, with a function turning the match into filter values. Rules are
independent: every rule that matches contributes, and a phrase matching
none yields empty filters (which select every record).
"""
import logging
import re
from dataclasses import replace
from typing import Callable, NamedTuple, Pattern

from .records import StringFilters

logger = logging.getLogger(__name__)


class PhraseRule(NamedTuple):
    name: str
    pattern: Pattern
    effect: Callable[[re.Match], dict]


PHRASE_RULES = (
    PhraseRule(
        'palindrome',
        re.compile(r'palindromic'),
        lambda m: {'is_palindrome': True},
    ),
    PhraseRule(
        'single_word',
        re.compile(r'single word'),
        lambda m: {'word_count': 1},
    ),
    PhraseRule(
        'longer_than',
        re.compile(r'longer than (\d+)', re.ASCII),
        # strictly longer
        lambda m: {'min_length': int(m.group(1)) + 1},
    ),
    PhraseRule(
        'letter',
        re.compile(r'letter (\w)', re.ASCII),
        lambda m: {'contains_character': m.group(1)},
    ),
)


def translate_phrase(phrase: str, rules=PHRASE_RULES) -> StringFilters:
    """Derive structured filters from ``phrase`` using ``rules`` in order."""
    lowered = phrase.lower()
    filters = StringFilters()
    for rule in rules:
        match = rule.pattern.search(lowered)
        if match:
            filters = replace(filters, **rule.effect(match))
    logger.debug("Translated phrase %r into %s", phrase, filters.applied())
    return filters
