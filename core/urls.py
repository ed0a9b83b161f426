from django.urls import path

from . import views

urlpatterns = [
    path("upload", views.ImageUploadView.as_view(), name="upload"),
    path("health", views.health_check, name="health"),
]
