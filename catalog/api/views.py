# =============================================================================
# IMPORTS
# =============================================================================
import logging

import django_filters
from django.db.models import ProtectedError
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from accounts.permissions import IsAdminSession
from catalog.models import Package, SafariPhoto, Testimonial, Vehicle
from core.exceptions import ReferencedObjectConflict
from .serializers import (
    PackageSerializer, SafariPhotoSerializer, TestimonialSerializer, VehicleSerializer,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FILTERS
# =============================================================================
class PackageFilter(django_filters.FilterSet):
    isPopular = django_filters.BooleanFilter(field_name='is_popular')

    class Meta:
        model = Package
        fields = ['isPopular']


class SafariPhotoFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name='category', lookup_expr='iexact')
    isFeatured = django_filters.BooleanFilter(field_name='is_featured')

    class Meta:
        model = SafariPhoto
        fields = ['category', 'isFeatured']


# =============================================================================
# BASE VIEWSET
# =============================================================================
class CatalogViewSet(viewsets.ModelViewSet):
    """
    Public reads, admin writes.

    PUT behaves like PATCH: omitted fields keep their stored value.
    """
    public_actions = ('list', 'retrieve')
    filter_backends = [DjangoFilterBackend]

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        return [IsAdminSession()]

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)

    def perform_create(self, serializer):
        instance = serializer.save()
        logger.info(f"Created {instance._meta.model_name} {instance.pk}")

    def perform_destroy(self, instance):
        label = f"{instance._meta.model_name} {instance.pk}"
        try:
            instance.delete()
        except ProtectedError:
            logger.warning(f"Refused to delete {label}: still referenced by bookings")
            raise ReferencedObjectConflict()
        logger.info(f"Deleted {label}")


# =============================================================================
# CATALOG VIEWSETS
# =============================================================================
class VehicleViewSet(CatalogViewSet):
    queryset = Vehicle.objects.all()
    serializer_class = VehicleSerializer


class PackageViewSet(CatalogViewSet):
    queryset = Package.objects.all()
    serializer_class = PackageSerializer
    filterset_class = PackageFilter


class SafariPhotoViewSet(CatalogViewSet):
    queryset = SafariPhoto.objects.all()
    serializer_class = SafariPhotoSerializer
    filterset_class = SafariPhotoFilter
    public_actions = ('list', 'retrieve', 'featured')

    @action(detail=False, methods=['get'])
    def featured(self, request):
        """Featured photos only, newest first."""
        serializer = self.get_serializer(SafariPhoto.featured.all(), many=True)
        return Response(serializer.data)


class TestimonialViewSet(mixins.CreateModelMixin,
                         mixins.ListModelMixin,
                         mixins.RetrieveModelMixin,
                         mixins.DestroyModelMixin,
                         viewsets.GenericViewSet):
    """
    Visitors may post testimonials; only admins delete or approve them.

    Non-admins see approved testimonials only.
    """
    serializer_class = TestimonialSerializer

    def get_permissions(self):
        if self.action in ('list', 'retrieve', 'create'):
            return [AllowAny()]
        return [IsAdminSession()]

    def get_queryset(self):
        user = self.request.user
        if user and getattr(user, 'is_admin', False):
            return Testimonial.objects.all()
        return Testimonial.approved.all()

    def perform_create(self, serializer):
        testimonial = serializer.save()
        logger.info(
            f"New testimonial {testimonial.pk} from {testimonial.client_name} "
            f"(approved={testimonial.is_approved})"
        )

    def perform_destroy(self, instance):
        logger.info(f"Deleted testimonial {instance.pk}")
        instance.delete()

    @action(detail=True, methods=['post', 'patch'])
    def approve(self, request, pk=None):
        """Publish a testimonial on the public site."""
        testimonial = self.get_object()
        testimonial.approve()
        logger.info(f"Approved testimonial {testimonial.pk}")
        return Response(self.get_serializer(testimonial).data)
