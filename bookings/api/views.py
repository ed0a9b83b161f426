# =============================================================================
# IMPORTS
# =============================================================================
import logging

import django_filters
from django.db import DatabaseError
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminSession
from bookings import services
from bookings.models import Booking, BookingStatus, Contact, InquiryKind
from catalog.models import Package, Vehicle
from .serializers import BookingSerializer, BookingStatusSerializer, ContactSerializer

logger = logging.getLogger(__name__)


# =============================================================================
# FILTERS
# =============================================================================
class BookingFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=BookingStatus.choices)
    inquiryKind = django_filters.ChoiceFilter(field_name='inquiry_kind', choices=InquiryKind.choices)
    packageId = django_filters.UUIDFilter(field_name='package_id')
    vehicleId = django_filters.UUIDFilter(field_name='vehicle_id')

    class Meta:
        model = Booking
        fields = ['status', 'inquiryKind', 'packageId', 'vehicleId']


class ContactFilter(django_filters.FilterSet):
    isRead = django_filters.BooleanFilter(field_name='is_read')

    class Meta:
        model = Contact
        fields = ['isRead']


# =============================================================================
# LEAD VIEWSETS
# =============================================================================
class LeadViewSet(viewsets.GenericViewSet):
    """Visitors create leads; everything else is for admins."""

    def get_permissions(self):
        if self.action == 'create':
            return [AllowAny()]
        return [IsAdminSession()]


class BookingViewSet(mixins.CreateModelMixin,
                     mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.DestroyModelMixin,
                     LeadViewSet):
    queryset = Booking.objects.select_related('package', 'vehicle')
    serializer_class = BookingSerializer
    filterset_class = BookingFilter

    def perform_destroy(self, instance):
        services.delete_booking(instance)

    @action(detail=True, methods=['patch'], url_path='status')
    def set_status(self, request, pk=None):
        """Move a booking to a new status."""
        booking = self.get_object()
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_booking_status(booking, serializer.validated_data['status'])
        return Response(BookingSerializer(booking).data)


class ContactViewSet(mixins.CreateModelMixin,
                     mixins.ListModelMixin,
                     mixins.DestroyModelMixin,
                     LeadViewSet):
    queryset = Contact.objects.all()
    serializer_class = ContactSerializer
    filterset_class = ContactFilter

    def perform_destroy(self, instance):
        services.delete_contact(instance)

    @action(detail=True, methods=['patch'], url_path='read')
    def mark_read(self, request, pk=None):
        """Mark a contact message as read."""
        contact = self.get_object()
        services.mark_contact_read(contact)
        return Response(self.get_serializer(contact).data)


# =============================================================================
# DASHBOARD
# =============================================================================
class DashboardView(APIView):
    """Headline counts for the admin console."""
    permission_classes = [IsAdminSession]

    def get(self, request):
        try:
            stats = {
                'totalBookings': Booking.objects.count(),
                'totalVehicles': Vehicle.objects.count(),
                'totalPackages': Package.objects.count(),
                'totalContacts': Contact.objects.count(),
                'pendingBookings': Booking.objects.pending().count(),
                'unreadContacts': Contact.objects.unread().count(),
            }
        except DatabaseError as e:
            logger.exception(f"Failed to fetch dashboard stats: {e}")
            return Response(
                {'message': 'Failed to fetch dashboard stats'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(stats)
