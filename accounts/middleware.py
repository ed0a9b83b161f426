from django.http import JsonResponse

from .sessions import AdminSessionManager


class AdminAreaMiddleware:
    """Reject anything under ``/api/admin/`` that lacks an admin session."""

    protected_prefix = "/api/admin/"
    session_manager_class = AdminSessionManager

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(self.protected_prefix):
            user = self.session_manager_class(request.session).get_user()
            if user is None:
                return JsonResponse({"message": "Not authenticated"}, status=401)
            if not user.is_admin:
                return JsonResponse({"message": "Admin access required"}, status=403)
        return self.get_response(request)
