from rest_framework import serializers


class StringPropertiesSerializer(serializers.Serializer):
    length = serializers.IntegerField()
    is_palindrome = serializers.BooleanField()
    unique_characters = serializers.IntegerField()
    word_count = serializers.IntegerField()
    sha256_hash = serializers.CharField()
    character_frequency_map = serializers.DictField(child=serializers.IntegerField())


class StringRecordSerializer(serializers.Serializer):
    """
    Read-only representation of an analyzed string
    """
    id = serializers.CharField()
    value = serializers.CharField(trim_whitespace=False)
    properties = StringPropertiesSerializer()
    created_at = serializers.DateTimeField()


class StringAnalyzeSerializer(serializers.Serializer):
    value = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        # CharField would coerce numbers to text; reject them outright
        raw = data.get('value') if hasattr(data, 'get') else None
        if raw is not None and not isinstance(raw, str):
            raise serializers.ValidationError(
                {'value': ["Value must be a string."]}, code='invalid_type')
        return super().to_internal_value(data)


class FiltersSerializer(serializers.Serializer):
    is_palindrome = serializers.BooleanField(allow_null=True, required=False)
    min_length = serializers.IntegerField(allow_null=True, required=False)
    max_length = serializers.IntegerField(allow_null=True, required=False)
    word_count = serializers.IntegerField(allow_null=True, required=False)
    contains_character = serializers.CharField(allow_null=True, required=False)


class StringListResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    filters_applied = FiltersSerializer()


class InterpretedQuerySerializer(serializers.Serializer):
    original = serializers.CharField()
    parsed_filters = FiltersSerializer()


class NaturalLanguageResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    interpreted_query = InterpretedQuerySerializer()


class ErrorResponseSerializer(serializers.Serializer):
    """
    Serializer for error responses
    """
    error = serializers.CharField()
    details = serializers.JSONField(required=False)
