from rest_framework import status


class StringAnalyzerError(Exception):
    """Base class for caller-input errors raised by the string services."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid request'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def as_payload(self):
        payload = {'error': self.message}
        if self.details is not None:
            payload['details'] = self.details
        return payload


class MissingValue(StringAnalyzerError):
    default_message = 'Value is required'


class InvalidValue(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = 'Value must be a string'


class Conflict(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = 'String already exists'


class MissingPhrase(StringAnalyzerError):
    default_message = 'Query parameter is required'


class InvalidFilter(StringAnalyzerError):
    default_message = 'Invalid filter parameters'


class NotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'String not found'
