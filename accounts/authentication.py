from rest_framework.authentication import BaseAuthentication

from .sessions import AdminSessionManager


class AdminSessionAuthentication(BaseAuthentication):
    """
    Authenticate API requests from the identity stored in the session cookie.

    CSRF is not enforced; the session cookie is SameSite=Strict.
    """
    session_manager_class = AdminSessionManager

    def authenticate(self, request):
        session = getattr(request._request, "session", None)
        if session is None:
            return None
        user = self.session_manager_class(session).get_user()
        if user is None:
            return None
        return (user, None)

    def authenticate_header(self, request):
        # A challenge keeps unauthenticated responses at 401 instead of 403.
        return 'Session realm="api"'
