from django.db import models


class StringRecord(models.Model):
    """
    Persisted analysis of a string, keyed by the SHA-256 of its value
    """
    id = models.CharField(primary_key=True, max_length=64)  # sha256 hex length = 64
    value = models.TextField()
    length = models.PositiveIntegerField()
    is_palindrome = models.BooleanField()
    unique_characters = models.PositiveIntegerField()
    word_count = models.PositiveIntegerField()
    sha256_hash = models.CharField(max_length=64, unique=True)
    character_frequency_map = models.JSONField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = 'strings'
        verbose_name = 'String'
        verbose_name_plural = 'Strings'

    def __str__(self):
        return f"{self.value[:50]} - {self.id[:12]}"
