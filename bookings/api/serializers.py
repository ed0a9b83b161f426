# =============================================================================
# IMPORTS
# =============================================================================
from rest_framework import serializers

from bookings import services
from bookings.models import Booking, BookingStatus, Contact, InquiryKind
from catalog.models import Package, Vehicle


# =============================================================================
# BOOKING SERIALIZERS
# =============================================================================
class BookingSerializer(serializers.ModelSerializer):
    customerName = serializers.CharField(source='customer_name', max_length=200)
    phone = serializers.CharField(max_length=50)
    normalizedPhone = serializers.ReadOnlyField(source='normalized_phone')
    packageId = serializers.PrimaryKeyRelatedField(
        source='package', queryset=Package.objects.all(),
        pk_field=serializers.UUIDField(), required=False, allow_null=True,
    )
    vehicleId = serializers.PrimaryKeyRelatedField(
        source='vehicle', queryset=Vehicle.objects.all(),
        pk_field=serializers.UUIDField(), required=False, allow_null=True,
    )
    message = serializers.CharField(allow_blank=True, trim_whitespace=False)
    preferredDate = serializers.DateField(source='preferred_date', required=False, allow_null=True)
    guestCount = serializers.IntegerField(source='guest_count', min_value=1, required=False, allow_null=True)
    inquiryKind = serializers.ChoiceField(source='inquiry_kind', choices=InquiryKind.choices, required=False)
    status = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Booking
        fields = [
            'id', 'customerName', 'email', 'phone', 'normalizedPhone',
            'packageId', 'vehicleId', 'message', 'preferredDate', 'guestCount',
            'inquiryKind', 'status', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ('id',)

    def create(self, validated_data):
        return services.create_booking(validated_data)


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BookingStatus.choices)


# =============================================================================
# CONTACT SERIALIZERS
# =============================================================================
class ContactSerializer(serializers.ModelSerializer):
    isRead = serializers.BooleanField(source='is_read', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Contact
        fields = ['id', 'name', 'email', 'message', 'isRead', 'createdAt']
        read_only_fields = ('id',)

    def create(self, validated_data):
        return services.create_contact(validated_data)
