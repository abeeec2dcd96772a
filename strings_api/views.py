from django_filters.utils import translate_validation
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .exceptions import InvalidFilter, InvalidValue, MissingValue, StringAnalyzerError
from .filters import StringRecordFilter
from .repository import StringRepository
from .serializers import (
    ErrorResponseSerializer,
    NaturalLanguageResponseSerializer,
    StringAnalyzeSerializer,
    StringListResponseSerializer,
    StringRecordSerializer,
)


def error_response(exc: StringAnalyzerError):
    return Response(exc.as_payload(), status=exc.status_code)


class StringsBaseView(APIView):
    # may be overridden through as_view(repository=...)
    repository = None

    def get_repository(self):
        return self.repository or StringRepository()


# POST & GET /strings

class StringAnalyzerView(StringsBaseView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={
            201: StringRecordSerializer,
            400: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
            422: ErrorResponseSerializer,
        },
    )
    def post(self, request):
        serializer = StringAnalyzeSerializer(data=request.data)
        if not serializer.is_valid():
            errors = serializer.errors.get('value') or [None]
            if getattr(errors[0], 'code', None) == 'invalid_type':
                return error_response(InvalidValue())
            return error_response(MissingValue())

        try:
            record = services.submit_string(self.get_repository(), serializer.validated_data['value'])
        except StringAnalyzerError as e:
            return error_response(e)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this character",
                type=openapi.TYPE_STRING,
            ),
        ],
        responses={
            200: StringListResponseSerializer,
            400: ErrorResponseSerializer,
        },
    )
    def get(self, request):
        filterset = StringRecordFilter(request.query_params)
        if not filterset.is_valid():
            return error_response(InvalidFilter(details=translate_validation(filterset.errors).detail))

        result = services.list_strings(self.get_repository(), filterset.to_filters())
        return Response({
            "data": StringRecordSerializer(result.records, many=True).data,
            "count": result.count,
            "filters_applied": result.filters.to_dict(),
        }, status=status.HTTP_200_OK)


# GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(StringsBaseView):

    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={
            200: NaturalLanguageResponseSerializer,
            400: ErrorResponseSerializer,
        },
    )
    def get(self, request):
        try:
            result = services.filter_by_phrase(self.get_repository(), request.query_params.get("query", ""))
        except StringAnalyzerError as e:
            return error_response(e)

        return Response({
            "data": StringRecordSerializer(result.records, many=True).data,
            "count": result.count,
            "interpreted_query": {
                "original": result.phrase,
                "parsed_filters": result.filters.applied(),
            },
        }, status=status.HTTP_200_OK)


# GET /strings/{string_value}

class StringDetailView(StringsBaseView):

    @swagger_auto_schema(
        operation_summary="Get a stored string by its value",
        responses={
            200: StringRecordSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def get(self, request, value):
        try:
            record = services.get_string(self.get_repository(), value)
        except StringAnalyzerError as e:
            return error_response(e)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)
