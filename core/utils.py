# =============================================================================
# UTILS.PY
# =============================================================================
import re


# =============================================================================
# PHONE NUMBER UTILITIES
# =============================================================================

def normalize_phone_number(phone_number: str) -> str:
    """
    Normalize a phone number to E.164 format.

    Kenyan local forms (``0712...``, ``712...``, ``254712...``) get the
    ``+254`` prefix. Other numbers of 10 to 15 digits are prefixed with ``+``.
    Anything else (several numbers, free text, too few digits) yields ``""``.

    Args:
        phone_number: The phone number as typed by the visitor

    Returns:
        The E.164 number, or an empty string when none can be derived
    """
    if not phone_number:
        return ""

    digits = re.sub(r'\D', '', phone_number)

    if digits.startswith('0') and len(digits) == 10:
        return '+254' + digits[1:]
    if digits[:1] in ('7', '1') and len(digits) == 9:
        return '+254' + digits
    if digits.startswith('254') and len(digits) == 12:
        return '+' + digits
    if 10 <= len(digits) <= 15:
        return '+' + digits

    return ""


# =============================================================================
# PRIVACY UTILITIES
# =============================================================================

def mask_email(email: str) -> str:
    """Mask an email address for logging, e.g. ``jo****@example.com``."""
    if not email or '@' not in email:
        return email

    local, domain = email.split('@', 1)
    visible = local[:2] if len(local) > 2 else local[:1]
    return f"{visible}{'*' * (len(local) - len(visible))}@{domain}"


# =============================================================================
# HTTP UTILITIES
# =============================================================================

def get_client_ip(request):
    """Client IP, honouring the first hop of X-Forwarded-For."""
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')
