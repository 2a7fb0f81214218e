"""
Custom authentication backends for token and JWT auth.

Both classes refuse credentials belonging to staff accounts that are
awaiting approval.  ``clinic.exceptions`` is imported lazily: DRF loads
this module while resolving ``DEFAULT_AUTHENTICATION_CLASSES``, which may
happen in the middle of importing ``clinic.exceptions`` itself.
"""
from __future__ import annotations

from rest_framework import authentication
from rest_framework_simplejwt import authentication as jwt_authentication

APPROVAL_ROLES = ('Doctor', 'Pharmacist')


def reject_pending(user):
    if user.role in APPROVAL_ROLES and not user.verified:
        from clinic.exceptions import PendingApproval
        raise PendingApproval()
    return user


class TokenAuthentication(authentication.TokenAuthentication):
    """Token authentication using the ``Token`` keyword.

    A doctor or pharmacist whose verification was revoked after a token
    was issued is rejected with ``PendingApproval``.
    """

    keyword = 'Token'

    def authenticate_credentials(self, key):
        user, token = super().authenticate_credentials(key)
        return reject_pending(user), token


class JWTAuthentication(jwt_authentication.JWTAuthentication):
    """Bearer JWT authentication with the same approval gate."""

    def get_user(self, validated_token):
        return reject_pending(super().get_user(validated_token))
