from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import BookingViewSet, ContactViewSet, DashboardView

router = SimpleRouter(trailing_slash=False)
router.register(r'bookings', BookingViewSet)
router.register(r'contacts', ContactViewSet)

urlpatterns = [
    path('', include(router.urls)),
    path('admin/dashboard', DashboardView.as_view(), name='dashboard'),
]
