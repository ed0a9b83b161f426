# =============================================================================
# IMPORTS
# =============================================================================
from django.core.validators import MinValueValidator
from django.db import models

from catalog.models import Package, Vehicle
from core.exceptions import InvalidStatusTransition
from core.models import CreatedAtModel, TimeStampedModel
from core.utils import normalize_phone_number


# =============================================================================
# CHOICES
# =============================================================================

class BookingStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'
    CANCELLED = 'cancelled', 'Cancelled'
    COMPLETED = 'completed', 'Completed'


# Statuses an admin may move a booking to from each status.
ALLOWED_TRANSITIONS = {
    BookingStatus.PENDING.value: {BookingStatus.CONFIRMED.value, BookingStatus.CANCELLED.value},
    BookingStatus.CONFIRMED.value: {
        BookingStatus.PENDING.value, BookingStatus.COMPLETED.value, BookingStatus.CANCELLED.value,
    },
    BookingStatus.CANCELLED.value: {BookingStatus.PENDING.value},
    BookingStatus.COMPLETED.value: set(),
}


class InquiryKind(models.TextChoices):
    PACKAGE = 'package', 'Package'
    VEHICLE = 'vehicle', 'Vehicle'
    GENERAL = 'general', 'General'


# =============================================================================
# CUSTOM MANAGERS
# =============================================================================

class BookingManager(models.Manager):
    """Custom manager for Booking model."""

    def pending(self):
        return self.filter(status=BookingStatus.PENDING)

    def confirmed(self):
        return self.filter(status=BookingStatus.CONFIRMED)

    def cancelled(self):
        return self.filter(status=BookingStatus.CANCELLED)

    def completed(self):
        return self.filter(status=BookingStatus.COMPLETED)


class ContactManager(models.Manager):

    def unread(self):
        return self.filter(is_read=False)


# =============================================================================
# LEAD MODELS
# =============================================================================

class Booking(TimeStampedModel):
    """A booking inquiry from the public site."""
    customer_name = models.CharField(max_length=200)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    normalized_phone = models.CharField(max_length=20, blank=True, editable=False)
    package = models.ForeignKey(
        Package, on_delete=models.PROTECT, null=True, blank=True, related_name='bookings'
    )
    vehicle = models.ForeignKey(
        Vehicle, on_delete=models.PROTECT, null=True, blank=True, related_name='bookings'
    )
    message = models.TextField(blank=True, default='')
    preferred_date = models.DateField(null=True, blank=True)
    guest_count = models.PositiveIntegerField(null=True, blank=True, validators=[MinValueValidator(1)])
    inquiry_kind = models.CharField(max_length=10, choices=InquiryKind.choices, default=InquiryKind.GENERAL)
    status = models.CharField(
        max_length=10, choices=BookingStatus.choices, default=BookingStatus.PENDING, db_index=True
    )

    objects = BookingManager()

    def __str__(self):
        return f"{self.customer_name} - {self.get_status_display()}"

    def save(self, *args, **kwargs):
        self.normalized_phone = normalize_phone_number(self.phone)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'phone' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'normalized_phone'}
        super().save(*args, **kwargs)

    @staticmethod
    def infer_inquiry_kind(package, vehicle):
        if package is not None:
            return InquiryKind.PACKAGE
        if vehicle is not None:
            return InquiryKind.VEHICLE
        return InquiryKind.GENERAL

    def can_transition_to(self, status):
        current, target = str(self.status), str(status)
        return target == current or target in ALLOWED_TRANSITIONS.get(current, set())

    def transition_to(self, status):
        """
        Move the booking to ``status``.

        Returns:
            True if the status changed, False when it was already ``status``

        Raises:
            ValueError: ``status`` is not a booking status
            InvalidStatusTransition: the current status does not allow it
        """
        target = BookingStatus(status).value
        current = str(self.status)
        if target == current:
            return False
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(current, target)
        self.status = target
        self.save(update_fields=["status", "updated_at"])
        return True

    def confirm(self):
        """Confirm the booking."""
        return self.transition_to(BookingStatus.CONFIRMED)

    def cancel(self):
        """Cancel the booking."""
        return self.transition_to(BookingStatus.CANCELLED)

    def complete(self):
        """Mark the booking as completed."""
        return self.transition_to(BookingStatus.COMPLETED)


class Contact(CreatedAtModel):
    """A message sent through the contact form."""
    name = models.CharField(max_length=200)
    email = models.EmailField()
    message = models.TextField()
    is_read = models.BooleanField(default=False, db_index=True)

    objects = ContactManager()

    def __str__(self):
        return f"{self.name} <{self.email}>"

    def mark_read(self):
        """Flag the message as read. Calling it again changes nothing."""
        if not self.is_read:
            self.is_read = True
            self.save(update_fields=['is_read'])
