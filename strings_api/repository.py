import logging

from django.db import IntegrityError, transaction

from .exceptions import Conflict
from .models import StringRecord
from .records import AnalyzedString, StringProperties

logger = logging.getLogger(__name__)


def decode_row(row: StringRecord) -> AnalyzedString:
    """Convert a persisted row into the in-memory record shape."""
    props = StringProperties(
        length=row.length,
        is_palindrome=bool(row.is_palindrome),
        unique_characters=row.unique_characters,
        word_count=row.word_count,
        sha256_hash=row.sha256_hash,
        character_frequency_map=dict(row.character_frequency_map),
    )
    return AnalyzedString(
        id=row.id,
        value=row.value,
        properties=props,
        created_at=row.created_at,
    )


class StringRepository:
    """
    Storage for analyzed strings backed by the ``StringRecord`` model.

    Records are append-only: nothing here updates or deletes a row.
    """

    manager = StringRecord.objects

    def get(self, identity: str):
        """Return the record stored under ``identity`` or ``None``."""
        try:
            row = self.manager.get(pk=identity)
        except StringRecord.DoesNotExist:
            return None
        return decode_row(row)

    def exists(self, identity: str) -> bool:
        return self.manager.filter(pk=identity).exists()

    def insert(self, record: AnalyzedString) -> AnalyzedString:
        """
        Persist a new record. Raises ``Conflict`` if the identity is already
        stored; the existence check and the insert run in one transaction.
        """
        props = record.properties
        try:
            with transaction.atomic():
                if self.exists(record.id):
                    raise Conflict()
                self.manager.create(
                    id=record.id,
                    value=record.value,
                    length=props.length,
                    is_palindrome=props.is_palindrome,
                    unique_characters=props.unique_characters,
                    word_count=props.word_count,
                    sha256_hash=props.sha256_hash,
                    character_frequency_map=props.character_frequency_map,
                    created_at=record.created_at,
                )
        except IntegrityError:
            # lost a race against a concurrent insert of the same value
            logger.warning("Duplicate insert for id=%s rejected by database", record.id[:12])
            raise Conflict()
        return record

    def list_all(self):
        """Return every stored record, oldest first."""
        return [decode_row(row) for row in self.manager.order_by('created_at')]
