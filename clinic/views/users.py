"""
User administration views.

Administrators list, create, verify and delete accounts.  Any
authenticated user may read and update their own record, but only an
administrator may change a role.  Deleting a user cascades to the
appointments and prescriptions that reference them.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..permissions import IsAdminRole, is_admin
from ..serializers.users import UserCreateSerializer, UserUpdateSerializer
from ..services import users as user_service
from ..services.audit import client_ip, log_action


def _ensure_self_or_admin(request, email: str) -> None:
    if not (is_admin(request.user) or request.user.email == email):
        raise PermissionDenied('You may only access your own account.')


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def users(request):
    if request.method == 'GET':
        return Response([user_service.format_user(u) for u in user_service.list_users()])
    s = UserCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = user_service.create_user(**s.validated_data)
    log_action(user=request.user, action='user_create', object_type='user', object_id=user.email,
               detail={'role': user.role, 'verified': user.verified})
    return Response(user_service.format_user(user), status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def users_pending(request):
    """Doctors and pharmacists waiting for approval."""
    return Response([user_service.format_user(u) for u in user_service.pending_verification()])


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def users_by_role(request, role: str):
    return Response([user_service.format_user(u) for u in user_service.users_by_role(role)])


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def user_detail(request, email: str):
    if request.method == 'DELETE':
        if not is_admin(request.user):
            raise PermissionDenied('Only administrators may delete users.')
        summary = user_service.delete_user(email)
        log_action(user=request.user, action='user_delete', object_type='user', object_id=email,
                   detail={**summary, 'ip': client_ip(request)})
        return Response(status=status.HTTP_204_NO_CONTENT)

    _ensure_self_or_admin(request, email)
    if request.method == 'GET':
        return Response(user_service.format_user(user_service.get_user(email)))

    s = UserUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    fields = dict(s.validated_data)
    role = fields.get('role')
    if role is not None and not is_admin(request.user) and role != request.user.role:
        raise PermissionDenied('Only administrators may change roles.')
    user = user_service.update_user(email, **fields)
    return Response(user_service.format_user(user))


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_verify(request, email: str):
    user = user_service.verify(email)
    log_action(user=request.user, action='user_verify', object_type='user', object_id=email,
               detail={'role': user.role})
    return Response({'ok': True, 'message': 'User verified successfully', 'user': user_service.format_user(user)})
