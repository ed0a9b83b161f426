# =============================================================================
# LEAD CAPTURE & TRIAGE
# =============================================================================
"""
Write operations on bookings and contact messages.

Views validate input with serializers and hand the cleaned data here.
"""
import logging

from core.exceptions import InvalidStatusTransition
from core.utils import mask_email
from .models import Booking, BookingStatus, Contact
from .notifications import notify_new_booking, notify_new_contact

logger = logging.getLogger(__name__)


def create_booking(data):
    """
    Persist a new booking inquiry.

    The status is always ``pending`` whatever the caller supplied, and the
    inquiry kind is inferred from the references when it is not given.
    """
    data = dict(data)
    data.pop('status', None)
    if not data.get('inquiry_kind'):
        data['inquiry_kind'] = Booking.infer_inquiry_kind(data.get('package'), data.get('vehicle'))

    booking = Booking.objects.create(status=BookingStatus.PENDING, **data)
    logger.info(
        f"New {booking.inquiry_kind} booking {booking.pk} from {mask_email(booking.email)}"
    )
    notify_new_booking(booking)
    return booking


def update_booking_status(booking, status):
    """Apply an admin status change through the transition table."""
    previous = booking.status
    try:
        changed = booking.transition_to(status)
    except (InvalidStatusTransition, ValueError):
        logger.warning(f"Rejected status change for booking {booking.pk}: {previous} -> {status}")
        raise
    if changed:
        logger.info(f"Booking {booking.pk} status changed: {previous} -> {booking.status}")
    return booking


def delete_booking(booking):
    logger.info(f"Deleting booking {booking.pk} ({booking.status})")
    booking.delete()


def create_contact(data):
    """Persist a contact message; it always starts unread."""
    data = dict(data)
    data.pop('is_read', None)
    contact = Contact.objects.create(is_read=False, **data)
    logger.info(f"Contact message {contact.pk} submitted by {mask_email(contact.email)}")
    notify_new_contact(contact)
    return contact


def mark_contact_read(contact):
    contact.mark_read()
    logger.info(f"Contact message {contact.pk} marked read")
    return contact


def delete_contact(contact):
    logger.info(f"Deleting contact message {contact.pk}")
    contact.delete()
