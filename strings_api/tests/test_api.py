import json
from urllib.parse import quote

from django.test import Client, TestCase

from strings_api.models import StringRecord
from strings_api.utils import compute_sha256


class StringApiTests(TestCase):
    def setUp(self):
        self.client = Client()

    def post_value(self, payload):
        return self.client.post(
            "/strings",
            data=json.dumps(payload),
            content_type="application/json",
        )

    def test_create_string(self):
        resp = self.post_value({"value": "race a car"})
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertEqual(data["id"], compute_sha256("race a car"))
        self.assertEqual(data["value"], "race a car")
        self.assertEqual(data["properties"]["length"], 10)
        self.assertFalse(data["properties"]["is_palindrome"])
        self.assertEqual(data["properties"]["word_count"], 3)
        self.assertEqual(data["properties"]["sha256_hash"], data["id"])
        self.assertEqual(data["properties"]["character_frequency_map"][" "], 2)
        self.assertIn("created_at", data)

    def test_whitespace_is_kept_verbatim(self):
        resp = self.post_value({"value": "  padded  "})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["value"], "  padded  ")
        self.assertEqual(resp.json()["properties"]["length"], 10)

    def test_duplicate_returns_conflict(self):
        self.assertEqual(self.post_value({"value": "abba"}).status_code, 201)
        resp = self.post_value({"value": "abba"})
        self.assertEqual(resp.status_code, 409)
        self.assertIn("error", resp.json())
        self.assertEqual(StringRecord.objects.count(), 1)

    def test_missing_value(self):
        for payload in [{}, {"value": ""}, {"value": None}]:
            resp = self.post_value(payload)
            self.assertEqual(resp.status_code, 400)
            self.assertIn("error", resp.json())
        self.assertEqual(StringRecord.objects.count(), 0)

    def test_non_string_value(self):
        resp = self.post_value({"value": 123})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(StringRecord.objects.count(), 0)

    def test_get_string_by_value(self):
        self.post_value({"value": "hello world"})
        resp = self.client.get("/strings/" + quote("hello world"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["value"], "hello world")

    def test_get_unknown_string(self):
        resp = self.client.get("/strings/nothing-here")
        self.assertEqual(resp.status_code, 404)


class StringListApiTests(TestCase):
    def setUp(self):
        self.client = Client()
        for value in ["abba", "hello world", "a"]:
            self.client.post(
                "/strings",
                data=json.dumps({"value": value}),
                content_type="application/json",
            )

    def test_list_without_filters(self):
        resp = self.client.get("/strings")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 3)
        self.assertEqual(len(data["data"]), 3)
        self.assertEqual(data["filters_applied"], {
            "is_palindrome": None,
            "min_length": None,
            "max_length": None,
            "word_count": None,
            "contains_character": None,
        })

    def test_list_with_filters(self):
        resp = self.client.get("/strings", {"min_length": 5, "word_count": 2})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([item["value"] for item in data["data"]], ["hello world"])
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["filters_applied"]["min_length"], 5)
        self.assertEqual(data["filters_applied"]["word_count"], 2)

    def test_list_palindromes(self):
        resp = self.client.get("/strings", {"is_palindrome": "true", "contains_character": "b"})
        self.assertEqual([item["value"] for item in resp.json()["data"]], ["abba"])
        self.assertIs(resp.json()["filters_applied"]["is_palindrome"], True)

    def test_contains_space(self):
        resp = self.client.get("/strings", {"contains_character": " "})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([item["value"] for item in resp.json()["data"]], ["hello world"])
        self.assertEqual(resp.json()["filters_applied"]["contains_character"], " ")

    def test_invalid_filter_value(self):
        resp = self.client.get("/strings", {"max_length": "long"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("max_length", resp.json()["details"])


class NaturalLanguageFilterApiTests(TestCase):
    def setUp(self):
        self.client = Client()
        for value in ["abba", "hello world", "a"]:
            self.client.post(
                "/strings",
                data=json.dumps({"value": value}),
                content_type="application/json",
            )

    def test_translated_query(self):
        query = "find palindromic strings longer than 3"
        resp = self.client.get("/strings/filter-by-natural-language", {"query": query})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([item["value"] for item in data["data"]], ["abba"])
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["interpreted_query"], {
            "original": query,
            "parsed_filters": {"is_palindrome": True, "min_length": 4},
        })

    def test_single_word_palindromes(self):
        resp = self.client.get("/strings/filter-by-natural-language",
                               {"query": "all single word palindromic strings"})
        self.assertEqual(sorted(item["value"] for item in resp.json()["data"]), ["a", "abba"])

    def test_unmatched_query_returns_everything(self):
        resp = self.client.get("/strings/filter-by-natural-language", {"query": "show me stuff"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 3)
        self.assertEqual(resp.json()["interpreted_query"]["parsed_filters"], {})

    def test_missing_query(self):
        resp = self.client.get("/strings/filter-by-natural-language")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())
