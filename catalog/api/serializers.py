# =============================================================================
# IMPORTS
# =============================================================================
from rest_framework import serializers

from catalog.models import Package, SafariPhoto, Testimonial, Vehicle


# =============================================================================
# SHARED FIELDS
# =============================================================================
def image_url_field(required=False):
    if required:
        return serializers.CharField(source='image_url', max_length=500)
    return serializers.CharField(
        source='image_url', max_length=500, required=False, allow_null=True, allow_blank=True
    )


def string_list_field():
    return serializers.ListField(child=serializers.CharField(allow_blank=False), required=False)


class CatalogSerializer(serializers.ModelSerializer):
    """Base serializer exposing timestamps in camelCase."""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)


# =============================================================================
# CATALOG SERIALIZERS
# =============================================================================
class VehicleSerializer(CatalogSerializer):
    features = string_list_field()
    imageUrl = image_url_field()

    class Meta:
        model = Vehicle
        fields = [
            'id', 'name', 'description', 'capacity', 'features',
            'imageUrl', 'status', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ('id',)


class PackageSerializer(CatalogSerializer):
    itinerary = string_list_field()
    imageUrl = image_url_field()
    isPopular = serializers.BooleanField(source='is_popular', required=False)

    class Meta:
        model = Package
        fields = [
            'id', 'name', 'description', 'duration', 'price', 'itinerary',
            'imageUrl', 'isPopular', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ('id',)


class SafariPhotoSerializer(CatalogSerializer):
    imageUrl = image_url_field(required=True)
    takenDate = serializers.DateField(source='taken_date', required=False, allow_null=True)
    isFeatured = serializers.BooleanField(source='is_featured', required=False)

    class Meta:
        model = SafariPhoto
        fields = [
            'id', 'title', 'description', 'imageUrl', 'category', 'location',
            'takenDate', 'isFeatured', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ('id',)
        extra_kwargs = {
            'description': {'required': False, 'allow_null': True, 'allow_blank': True},
            'category': {'required': False, 'allow_null': True, 'allow_blank': True},
            'location': {'required': False, 'allow_null': True, 'allow_blank': True},
        }


class TestimonialSerializer(serializers.ModelSerializer):
    clientName = serializers.CharField(source='client_name', max_length=200)
    rating = serializers.CharField()
    imageUrl = image_url_field()
    isApproved = serializers.BooleanField(source='is_approved', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Testimonial
        fields = ['id', 'clientName', 'content', 'rating', 'imageUrl', 'isApproved', 'createdAt']
        read_only_fields = ('id',)

    def validate_rating(self, value):
        # Numbers arrive coerced to their string form.
        value = value.strip()
        if value not in ('1', '2', '3', '4', '5'):
            raise serializers.ValidationError("Rating must be between 1 and 5")
        return value
