from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import PackageViewSet, SafariPhotoViewSet, TestimonialViewSet, VehicleViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'vehicles', VehicleViewSet)
router.register(r'packages', PackageViewSet)
router.register(r'photos', SafariPhotoViewSet)
router.register(r'testimonials', TestimonialViewSet, basename='testimonial')

urlpatterns = [
    path('', include(router.urls)),
]
