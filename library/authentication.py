from django.conf import settings
from rest_framework import authentication, exceptions

from .identity import on_connect


def _meta_key(header: str) -> str:
    return "HTTP_" + header.upper().replace("-", "_")


class CallerIdentityAuthentication(authentication.BaseAuthentication):
    """
    Authenticates a request as the User whose id is the caller identity header.

    No header -> anonymous (views that need a caller answer 401).
    Blank header -> rejected.
    """

    def authenticate(self, request):
        raw = request.META.get(_meta_key(settings.CALLER_IDENTITY_HEADER))
        if raw is None:
            return None
        identity = raw.strip()
        if not identity:
            raise exceptions.AuthenticationFailed("Caller identity header is empty.")
        return on_connect(identity), identity

    def authenticate_header(self, request):
        return settings.CALLER_IDENTITY_HEADER
