"""
Department management views.

Any authenticated user may browse departments; only administrators may
create, update or delete them.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..permissions import IsAdminRole, ReadOnly
from ..serializers.catalog import DepartmentSerializer
from ..services import departments as department_service
from ..services.departments import format_department


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole | ReadOnly])
def departments(request):
    if request.method == 'GET':
        return Response([format_department(d) for d in department_service.list_departments()])
    s = DepartmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    dept = department_service.create_department(**s.validated_data)
    return Response(format_department(dept), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole | ReadOnly])
def department_detail(request, pk):
    if request.method == 'GET':
        return Response(format_department(department_service.get_department(pk)))
    if request.method == 'DELETE':
        department_service.delete_department(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    # PUT replaces every field
    s = DepartmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    dept = department_service.update_department(pk, **s.validated_data)
    return Response(format_department(dept))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def departments_active(request):
    return Response([format_department(d) for d in department_service.list_departments(active_only=True)])


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def department_by_name(request, name: str):
    return Response(format_department(department_service.get_by_name(name)))
