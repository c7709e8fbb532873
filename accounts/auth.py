# accounts/auth.py
"""
Admin access for the single shared recruiter login.

The check is advisory: a cookie marker, not a signed session. Views only talk
to AuthContext, so a real session/token scheme can be swapped in through
settings.FIRSTCONNECT_AUTH_CONTEXT.
"""
import logging

from django.conf import settings
from django.utils.module_loading import import_string

from jobs.exceptions import InvalidCredential

logger = logging.getLogger(__name__)

RESTRICTED_LOGIN_MESSAGE = "This login is restricted. Only the authorised admin email can sign in."


class AuthContext:
    """Capability check used by admin_required and the login/logout views."""

    def is_authorized(self, request):
        raise NotImplementedError

    def grant(self, response):
        raise NotImplementedError

    def revoke(self, response):
        raise NotImplementedError


class AdminMarker(AuthContext):
    cookie_name = 'adminAuth'
    sentinel = '1'

    def is_authorized(self, request):
        return request.COOKIES.get(self.cookie_name) == self.sentinel

    def grant(self, response):
        response.set_cookie(self.cookie_name, self.sentinel, path='/', httponly=True)
        return response

    def revoke(self, response):
        response.delete_cookie(self.cookie_name, path='/')
        return response


def get_auth_context():
    return import_string(settings.FIRSTCONNECT_AUTH_CONTEXT)()


def is_admin_request(request):
    return get_auth_context().is_authorized(request)


def check_admin_identifier(identifier):
    """Raise InvalidCredential unless identifier is the configured admin email."""
    email = str(identifier or '').strip().lower()
    if email != settings.FIRSTCONNECT_ADMIN_EMAIL.lower():
        logger.warning("Rejected admin login for %r", email)
        raise InvalidCredential(RESTRICTED_LOGIN_MESSAGE)
    return email
