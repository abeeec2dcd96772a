from django.test import TestCase

from strings_api import services
from strings_api.exceptions import Conflict, InvalidValue, MissingPhrase, MissingValue, NotFound
from strings_api.models import StringRecord
from strings_api.records import StringFilters
from strings_api.repository import StringRepository


class SubmitStringTests(TestCase):

    def setUp(self):
        self.repository = StringRepository()

    def test_submit_creates_record(self):
        record = services.submit_string(self.repository, "racecar")
        self.assertEqual(record.id, record.properties.sha256_hash)
        self.assertTrue(record.properties.is_palindrome)
        self.assertIsNotNone(record.created_at)
        self.assertEqual(StringRecord.objects.count(), 1)

    def test_resubmission_conflicts(self):
        first = services.submit_string(self.repository, "hello")
        with self.assertRaises(Conflict):
            services.submit_string(self.repository, "hello")

        stored = StringRecord.objects.get()
        self.assertEqual(stored.created_at, first.created_at)

    def test_empty_and_missing_values_rejected(self):
        for value in ["", None]:
            with self.assertRaises(MissingValue):
                services.submit_string(self.repository, value)
        self.assertEqual(StringRecord.objects.count(), 0)

    def test_non_string_rejected(self):
        with self.assertRaises(InvalidValue):
            services.submit_string(self.repository, 42)

    def test_unencodable_value_rejected(self):
        with self.assertRaises(InvalidValue):
            services.submit_string(self.repository, "\ud800")
        self.assertEqual(StringRecord.objects.count(), 0)

    def test_get_string(self):
        services.submit_string(self.repository, "find me")
        self.assertEqual(services.get_string(self.repository, "find me").value, "find me")
        with self.assertRaises(NotFound):
            services.get_string(self.repository, "missing")


class QueryServiceTests(TestCase):

    def setUp(self):
        self.repository = StringRepository()
        for value in ["abba", "hello world"]:
            services.submit_string(self.repository, value)

    def test_list_strings(self):
        result = services.list_strings(self.repository, StringFilters(min_length=5, word_count=2))
        self.assertEqual([r.value for r in result.records], ["hello world"])
        self.assertEqual(result.count, 1)
        self.assertEqual(result.filters, StringFilters(min_length=5, word_count=2))

    def test_filter_by_phrase(self):
        result = services.filter_by_phrase(self.repository, "find palindromic strings longer than 3")
        self.assertEqual([r.value for r in result.records], ["abba"])
        self.assertEqual(result.phrase, "find palindromic strings longer than 3")
        self.assertEqual(result.filters.applied(), {"is_palindrome": True, "min_length": 4})

    def test_filter_by_phrase_unmatched_returns_all(self):
        result = services.filter_by_phrase(self.repository, "anything at all")
        self.assertEqual(result.count, 2)

    def test_filter_by_phrase_requires_phrase(self):
        for phrase in ["", None]:
            with self.assertRaises(MissingPhrase):
                services.filter_by_phrase(self.repository, phrase)
