# =============================================================================
# URLS – Project Level (safari/urls.py)
# =============================================================================
from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path

from core.views import serve_upload

urlpatterns = [
    # ===============================
    # ⚙️ Default Django Admin
    # ===============================
    path("admin/", admin.site.urls),

    # ===============================
    # 📦 JSON API
    # ===============================
    path("api/", include("accounts.urls")),
    path("api/", include("core.urls")),
    path("api/", include("catalog.api.urls")),
    path("api/", include("bookings.api.urls")),
]

# ===============================
# 📸 Serve Uploaded Images
# ===============================
# Turn SERVE_UPLOADS off only when a front proxy serves MEDIA_URL.
if settings.DEBUG or settings.SERVE_UPLOADS:
    urlpatterns += [
        re_path(r"^%s(?P<path>.*)$" % settings.MEDIA_URL.lstrip("/"), serve_upload),
    ]
