import logging

from django.utils.decorators import method_decorator
from django.views.decorators.debug import sensitive_post_parameters
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from core.utils import get_client_ip
from .services import build_admin_user, check_admin_credentials
from .sessions import AdminSessionManager

logger = logging.getLogger(__name__)


class SessionView(APIView):
    """Base view that hands a session manager to its handlers."""
    permission_classes = [AllowAny]
    session_manager_class = AdminSessionManager

    def get_session_manager(self):
        return self.session_manager_class(self.request.session)


@method_decorator(sensitive_post_parameters("password"), name="dispatch")
class LoginView(SessionView):
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "login"

    def post(self, request):
        username = request.data.get("username")
        password = request.data.get("password")
        if not username or not password:
            raise ValidationError("Username and password required")

        if not check_admin_credentials(str(username), str(password)):
            logger.warning(f"Failed admin login for '{username}' from {get_client_ip(request)}")
            raise AuthenticationFailed("Invalid credentials")

        user = build_admin_user(str(username))
        self.get_session_manager().set_user(user)
        logger.info(f"Admin '{username}' logged in from {get_client_ip(request)}")
        return Response({"success": True, "user": user.to_dict()})


class LogoutView(SessionView):

    def post(self, request):
        self.get_session_manager().destroy()
        return Response({"success": True})


class AuthUserView(SessionView):
    """Return the identity bound to the current session."""

    def get(self, request):
        user = self.get_session_manager().get_user()
        if user is None:
            raise NotAuthenticated()
        return Response(user.to_dict(), status=status.HTTP_200_OK)
