"""
Standardized API Responses for the lookup endpoints

Every response body has the shape:
{
    "status": "success" | "error",
    "message": "string message or empty",
    "data": {...} | [] | null
}
"""
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler


def custom_exception_handler(exc, context):
    """
    Run DRF's exception handler, then wrap its payload in the error envelope.
    """
    response = exception_handler(exc, context)
    if response is not None:
        response.data = format_error_response(response.data)
    return response


def format_error_response(errors):
    """
    Flatten DRF error payloads into one message.

    - {"detail": "message"} -> "message"
    - {"key": ["error1", "error2"]} -> "key: error1, error2"
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict):
        if 'detail' in errors and len(errors) == 1:
            message = str(errors['detail'])
        else:
            message = "; ".join(
                f"{field}: {format_error_messages(field_errors)}"
                for field, field_errors in errors.items()
            )
    elif isinstance(errors, list):
        message = format_error_messages(errors)
    else:
        message = str(errors)

    return {
        "status": "error",
        "message": message,
        "data": None
    }


def format_error_messages(errors):
    if isinstance(errors, list):
        return ", ".join(format_error_messages(e) for e in errors)
    if isinstance(errors, dict):
        return "; ".join(f"{key}: {format_error_messages(value)}" for key, value in errors.items())
    return str(errors)


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps bodies not already in the standard envelope.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data)
            else:
                data = {"status": "success", "message": "", "data": data}

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        return isinstance(data, dict) and {'status', 'message', 'data'} <= data.keys()


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build a success envelope.

    Usage:
        return success_response(data=serializer.data, status_code=status.HTTP_201_CREATED)
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Build an error envelope.

    Usage:
        return error_response(message="Unknown key", status_code=status.HTTP_404_NOT_FOUND)
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
