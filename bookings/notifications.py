# =============================================================================
# LEAD NOTIFICATIONS
# =============================================================================
import logging

from django.conf import settings
from django.core.mail import send_mail

from core.utils import mask_email

logger = logging.getLogger(__name__)


def _notify_admin(subject, body):
    if not settings.LEAD_NOTIFICATIONS_ENABLED or not settings.ADMIN_EMAIL:
        return False
    try:
        send_mail(subject, body, settings.DEFAULT_FROM_EMAIL, [settings.ADMIN_EMAIL], fail_silently=False)
    except Exception as e:
        logger.exception(f"Failed to send admin notification '{subject}': {e}")
        return False
    return True


def notify_new_booking(booking):
    """E-mail the admin about a new booking inquiry."""
    lines = [
        "New booking inquiry received:",
        "",
        f"Name: {booking.customer_name}",
        f"Email: {booking.email}",
        f"Phone: {booking.normalized_phone or booking.phone}",
        f"Type: {booking.get_inquiry_kind_display()}",
    ]
    if booking.package_id:
        lines.append(f"Package: {booking.package.name}")
    if booking.vehicle_id:
        lines.append(f"Vehicle: {booking.vehicle.name}")
    if booking.preferred_date:
        lines.append(f"Preferred Date: {booking.preferred_date:%Y-%m-%d}")
    if booking.guest_count:
        lines.append(f"Guests: {booking.guest_count}")
    lines += ["", "Message:", booking.message or "-"]

    sent = _notify_admin(f"New Booking Inquiry: {booking.customer_name}", "\n".join(lines))
    if sent:
        logger.info(f"Booking notification sent for {mask_email(booking.email)}")
    return sent


def notify_new_contact(contact):
    """E-mail the admin about a new contact message."""
    body = (
        f"New contact message received:\n\n"
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n\n"
        f"Message:\n{contact.message}\n\n"
        f"Submitted at: {contact.created_at}"
    )
    return _notify_admin(f"New Contact Message from {contact.name}", body)
