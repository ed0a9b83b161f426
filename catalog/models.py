# =============================================================================
# IMPORTS
# =============================================================================
from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models

from core.models import CreatedAtModel, TimeStampedModel


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

validate_rating = RegexValidator(r'^[1-5]$', "Rating must be between 1 and 5.")


def default_is_approved():
    return not getattr(settings, 'TESTIMONIALS_REQUIRE_APPROVAL', False)


# =============================================================================
# CUSTOM MANAGERS
# =============================================================================

class FeaturedManager(models.Manager):
    """Manager for featured items."""

    def get_queryset(self):
        return super().get_queryset().filter(is_featured=True)


class PopularManager(models.Manager):
    """Manager for popular packages."""

    def get_queryset(self):
        return super().get_queryset().filter(is_popular=True)


class ApprovedManager(models.Manager):
    """Manager for testimonials visible on the public site."""

    def get_queryset(self):
        return super().get_queryset().filter(is_approved=True)


# =============================================================================
# CATALOG MODELS
# =============================================================================

class Vehicle(TimeStampedModel):
    """A vehicle offered for transfers and safaris."""
    name = models.CharField(max_length=200)
    description = models.TextField()
    capacity = models.CharField(max_length=100, help_text="Free text, e.g. '7 Passengers'")
    features = models.JSONField(default=list, blank=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=50, default='available')

    def __str__(self):
        return f"{self.name} ({self.capacity})"


class Package(TimeStampedModel):
    """A tour package with a day-by-day itinerary."""
    name = models.CharField(max_length=200)
    description = models.TextField()
    duration = models.CharField(max_length=100)
    price = models.CharField(max_length=100, help_text="Display price, e.g. 'Ksh 150,000'")
    itinerary = models.JSONField(default=list, blank=True)
    image_url = models.CharField(max_length=500, blank=True, null=True)
    is_popular = models.BooleanField(default=False)

    objects = models.Manager()
    popular = PopularManager()

    def __str__(self):
        return self.name

    def mark_popular(self, popular=True):
        self.is_popular = popular
        self.save(update_fields=['is_popular', 'updated_at'])


class SafariPhoto(TimeStampedModel):
    """A gallery photo."""
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, null=True)
    image_url = models.CharField(max_length=500)
    category = models.CharField(max_length=100, blank=True, null=True, db_index=True)
    location = models.CharField(max_length=200, blank=True, null=True)
    taken_date = models.DateField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)

    objects = models.Manager()
    featured = FeaturedManager()

    def __str__(self):
        return self.title


class Testimonial(CreatedAtModel):
    """A client review. Rating is stored as the single character '1'..'5'."""
    client_name = models.CharField(max_length=200)
    content = models.TextField()
    rating = models.CharField(max_length=1, validators=[validate_rating])
    image_url = models.CharField(max_length=500, blank=True, null=True)
    is_approved = models.BooleanField(default=default_is_approved)

    objects = models.Manager()
    approved = ApprovedManager()

    def __str__(self):
        return f"{self.client_name} ({self.rating}/5)"

    def approve(self):
        """Publish the testimonial. Approving twice is harmless."""
        if not self.is_approved:
            self.is_approved = True
            self.save(update_fields=['is_approved'])
