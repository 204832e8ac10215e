from django.http import Http404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from lookup_project.pagination import auto_paginate
from lookup_project.response_formatter import error_response, success_response
from .serializers import ResolveKeySerializer, lookup_row_serializer
from .services import LookupService


def get_lookup_model_or_404(app_label, model_name):
    model = LookupService.get_lookup_model(app_label, model_name)
    if model is None:
        raise Http404(f"No lookup table '{app_label}.{model_name}'")
    return model


@api_view(['GET'])
@permission_classes([IsAuthenticated])
@auto_paginate
def lookup_row_list(request, app_label, model_name):
    """
    List the rows of a lookup table, ordered for display.
    Query Params:
    - name: Exact key match
    - search: Search by key or description
    - enabled: Filter on the enabled flag
    """
    model = get_lookup_model_or_404(app_label, model_name)
    rows = LookupService.get_rows(model, request.query_params)
    serializer = lookup_row_serializer(model)(rows, many=True)
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def lookup_row_detail(request, app_label, model_name, key):
    """
    Retrieve a lookup row by its human key.
    """
    model = get_lookup_model_or_404(app_label, model_name)
    record = LookupService.resolve_record(model, key)
    if record is None:
        raise Http404(f"No {model.__name__} matches '{key}'")
    return Response(lookup_row_serializer(model)(record).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def lookup_row_resolve(request, app_label, model_name):
    """
    Resolve a human key, creating the row when it does not exist yet.
    Body: {"key": "UT"}
    """
    model = get_lookup_model_or_404(app_label, model_name)
    serializer = ResolveKeySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    key = serializer.validated_data['key']
    record, created = LookupService.resolve_or_create(model, key)
    if record is None:
        return error_response(message=f"'{key}' is not a valid {model.__name__} key")

    data = lookup_row_serializer(model)(record).data
    if created:
        return success_response(
            data=data,
            message=f"{model.__name__} '{record}' created",
            status_code=status.HTTP_201_CREATED
        )
    return success_response(data=data)
