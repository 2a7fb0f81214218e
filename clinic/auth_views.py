"""
Authentication views: signup, login and JWT refresh / logout.

Login issues both a DRF token (``Authorization: Token <key>``) and a
JWT pair so that either scheme can be used by the front-end.  By
keeping these views apart from the authentication class (see
``clinic.authentication``) we avoid circular imports when Django REST
framework initialises authentication classes.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from clinic.exceptions import InvalidCredentials, PendingApproval
from clinic.serializers.auth import LoginSerializer, SignupSerializer
from clinic.services import users as user_service
from clinic.services.audit import client_ip, log_action

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Signup
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def signup_view(request):
    """
    Self-service registration.  Any ``verified`` flag in the body is
    ignored: patients and administrators are verified straight away,
    doctors and pharmacists wait for an administrator.
    """
    s = SignupSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = user_service.signup(**s.validated_data)

    log_action(user=user, action='signup', object_type='user', object_id=user.email,
               detail={'role': user.role, 'verified': user.verified, 'ip': client_ip(request)})

    message = 'Account created successfully!' if user.verified else 'Account created! Waiting for admin approval.'
    return Response({
        'ok': True,
        'message': message,
        'verified': user.verified,
        'user': user_service.format_user(user),
    }, status=status.HTTP_201_CREATED)

signup_view.cls.throttle_scope = 'login'


# ---------------------------------------------------------------------
# Email/password login
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    email = s.validated_data['email']

    try:
        user = user_service.authenticate_user(email, s.validated_data['password'])
    except (InvalidCredentials, PendingApproval) as exc:
        # audit the failed attempt, only the submitted e-mail is kept
        log_action(user=None, action='login', object_type='user', object_id=email,
                   detail={'result': exc.default_code, 'ip': client_ip(request)})
        raise

    log_action(user=user, action='login', object_type='user', object_id=user.email,
               detail={'result': 'ok', 'ip': client_ip(request)})

    token_obj, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)

    payload: dict[str, object] = {
        'ok': True,
        'message': 'Login successful!',
        'token': token_obj.key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
        'role': user.role,
        'user': user_service.format_user(user),
    }
    return Response(payload, status=200)

# ScopedRateThrottle reads throttle_scope from the wrapped APIView class
login_view.cls.throttle_scope = 'login'


# ---------------------------------------------------------------------
# JWT: refresh & logout
# ---------------------------------------------------------------------
@api_view(['POST'])
@permission_classes([AllowAny])
def jwt_refresh_view(request):
    """Return a new access token from refresh token."""
    view = TokenRefreshView.as_view()
    resp = view(request._request)
    if isinstance(resp, Response):
        data = dict(resp.data)
        if 'access' in data and 'jwt_access' not in data:
            data['jwt_access'] = data.pop('access')
        if 'refresh' in data and 'jwt_refresh' not in data:
            data['jwt_refresh'] = data.pop('refresh')
        return Response(data, status=resp.status_code)
    return resp


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def jwt_logout_view(request):
    """Blacklist current user's refresh tokens (all or a given one)."""
    refresh = request.data.get('refresh')
    count = 0
    if refresh:
        try:
            RefreshToken(refresh).blacklist()
            count = 1
        except TokenError as exc:
            logger.info('logout ignored invalid refresh token user=%s err=%s', request.user.email, exc)
    else:
        for token in OutstandingToken.objects.filter(user=request.user):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            count += int(created)
    Token.objects.filter(user=request.user).delete()
    logger.info('logout user=%s blacklisted=%s', request.user.email, count)
    return Response({'ok': True, 'blacklisted': count})
