import logging
from typing import List, NamedTuple

from django.utils import timezone

from .exceptions import Conflict, InvalidValue, MissingPhrase, MissingValue, NotFound
from .filters import apply_filters
from .nl_query import translate_phrase
from .records import AnalyzedString, StringFilters
from .repository import StringRepository
from .utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


class ListResult(NamedTuple):
    records: List[AnalyzedString]
    count: int
    filters: StringFilters


class PhraseResult(NamedTuple):
    records: List[AnalyzedString]
    count: int
    phrase: str
    filters: StringFilters


def submit_string(repository: StringRepository, value) -> AnalyzedString:
    """
    Analyze ``value`` and store it. Raises ``MissingValue`` for an absent or
    empty value and ``Conflict`` if the same value is already stored.
    """
    if value is None or value == '':
        raise MissingValue()
    if not isinstance(value, str):
        raise InvalidValue()
    try:
        value.encode('utf-8')
    except UnicodeEncodeError:
        raise InvalidValue("Value must be valid Unicode text")

    props = analyze_string(value)
    identity = props.sha256_hash
    if repository.get(identity) is not None:
        logger.warning("Rejected duplicate string id=%s", identity[:12])
        raise Conflict()

    record = AnalyzedString(
        id=identity,
        value=value,
        properties=props,
        created_at=timezone.now(),
    )
    repository.insert(record)
    logger.info("Stored string id=%s length=%s", identity[:12], props.length)
    return record


def get_string(repository: StringRepository, value: str) -> AnalyzedString:
    record = repository.get(compute_sha256(value))
    if record is None:
        raise NotFound()
    return record


def list_strings(repository: StringRepository, filters: StringFilters) -> ListResult:
    records = apply_filters(repository.list_all(), filters)
    logger.debug("Filtered strings with %s: %d match", filters.applied(), len(records))
    return ListResult(records=records, count=len(records), filters=filters)


def filter_by_phrase(repository: StringRepository, phrase) -> PhraseResult:
    """Translate ``phrase`` into filters and apply them to every stored string."""
    if not phrase:
        raise MissingPhrase()
    filters = translate_phrase(phrase)
    if filters.is_empty():
        logger.info("Phrase %r matched no rules, returning every string", phrase)
    result = list_strings(repository, filters)
    return PhraseResult(
        records=result.records,
        count=result.count,
        phrase=phrase,
        filters=filters,
    )
