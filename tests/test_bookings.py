import uuid
from datetime import timedelta

import pytest
from django.db import DatabaseError
from django.utils import timezone

from bookings.models import Booking, BookingStatus, Contact

pytestmark = pytest.mark.django_db


def booking_payload(**overrides):
    data = {
        "customerName": "Amina Otieno",
        "email": "amina@example.com",
        "phone": "0712 345 678",
        "message": "Looking forward to the Mara.",
    }
    data.update(overrides)
    return data


def contact_payload(**overrides):
    data = {"name": "Brian", "email": "brian@example.com", "message": "Do you do airport pickups?"}
    data.update(overrides)
    return data


# =============================================================================
# BOOKING CAPTURE
# =============================================================================

def test_booking_create_is_public_and_pending(api_client, make_package):
    package = make_package()

    response = api_client.post(
        "/api/bookings", booking_payload(packageId=str(package.pk), status="confirmed"), format="json"
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["packageId"] == str(package.pk)
    assert body["inquiryKind"] == "package"
    assert body["normalizedPhone"] == "+254712345678"
    assert Booking.objects.get().status == BookingStatus.PENDING


def test_booking_with_vehicle_only_is_vehicle_inquiry(api_client, make_vehicle):
    vehicle = make_vehicle()

    body = api_client.post(
        "/api/bookings",
        booking_payload(vehicleId=str(vehicle.pk), preferredDate="2025-07-14", guestCount=4),
        format="json",
    ).json()

    assert body["inquiryKind"] == "vehicle"
    assert body["packageId"] is None
    assert body["preferredDate"] == "2025-07-14"
    assert body["guestCount"] == 4


def test_booking_may_reference_package_and_vehicle(api_client, make_package, make_vehicle):
    package, vehicle = make_package(), make_vehicle()

    response = api_client.post(
        "/api/bookings",
        booking_payload(packageId=str(package.pk), vehicleId=str(vehicle.pk)),
        format="json",
    )

    assert response.status_code == 201
    booking = Booking.objects.get()
    assert booking.package == package and booking.vehicle == vehicle


@pytest.mark.parametrize("phone", [
    "0712 345 678 or 0733 456 789",
    "WhatsApp only, ask for Amina",
])
def test_booking_accepts_free_form_phone(api_client, phone):
    response = api_client.post("/api/bookings", booking_payload(phone=phone), format="json")

    assert response.status_code == 201
    booking = Booking.objects.get()
    booking.full_clean()
    assert booking.phone == phone
    assert booking.normalized_phone == ""


def test_general_booking_without_references(api_client):
    body = api_client.post("/api/bookings", booking_payload(message=""), format="json").json()

    assert body["inquiryKind"] == "general"
    assert body["message"] == ""


@pytest.mark.parametrize("field,value", [
    ("email", "not-an-email"),
    ("customerName", "   "),
    ("phone", ""),
    ("guestCount", 0),
])
def test_booking_rejects_bad_field(api_client, field, value):
    response = api_client.post("/api/bookings", booking_payload(**{field: value}), format="json")

    assert response.status_code == 400
    assert response.json()["field"] == field
    assert not Booking.objects.exists()


def test_booking_requires_message_key(api_client):
    payload = booking_payload()
    del payload["message"]

    response = api_client.post("/api/bookings", payload, format="json")

    assert response.status_code == 400
    assert response.json()["field"] == "message"


def test_booking_rejects_unknown_package(api_client):
    response = api_client.post("/api/bookings", booking_payload(packageId=str(uuid.uuid4())), format="json")

    assert response.status_code == 400
    assert response.json()["field"] == "packageId"


def test_booking_rejects_malformed_package_id(api_client):
    response = api_client.post("/api/bookings", booking_payload(packageId="abc"), format="json")

    assert response.status_code == 400
    assert response.json()["field"] == "packageId"


def test_booking_notification_sent_when_enabled(api_client, settings, mailoutbox):
    settings.LEAD_NOTIFICATIONS_ENABLED = True
    settings.ADMIN_EMAIL = "ops@example.com"

    api_client.post("/api/bookings", booking_payload(guestCount=2), format="json")

    assert len(mailoutbox) == 1
    assert mailoutbox[0].to == ["ops@example.com"]
    assert "Amina Otieno" in mailoutbox[0].subject
    assert "Guests: 2" in mailoutbox[0].body


def test_booking_survives_notification_failure(api_client, settings, monkeypatch):
    settings.LEAD_NOTIFICATIONS_ENABLED = True
    settings.ADMIN_EMAIL = "ops@example.com"

    def broken_send_mail(*args, **kwargs):
        raise OSError("SMTP unreachable")

    monkeypatch.setattr("bookings.notifications.send_mail", broken_send_mail)

    response = api_client.post("/api/bookings", booking_payload(), format="json")

    assert response.status_code == 201
    assert Booking.objects.count() == 1


# =============================================================================
# BOOKING TRIAGE
# =============================================================================

def test_booking_list_is_admin_only(api_client):
    assert api_client.get("/api/bookings").status_code == 401


def test_booking_list_newest_first_and_filtered(admin_api):
    older = Booking.objects.create(customer_name="Older", email="o@example.com", phone="1", status="confirmed")
    Booking.objects.create(customer_name="Newer", email="n@example.com", phone="2")
    Booking.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(hours=1))

    names = [b["customerName"] for b in admin_api.get("/api/bookings").json()]
    assert names == ["Newer", "Older"]

    confirmed = admin_api.get("/api/bookings?status=confirmed").json()
    assert [b["customerName"] for b in confirmed] == ["Older"]


def test_booking_list_rejects_unknown_status_filter(admin_api):
    assert admin_api.get("/api/bookings?status=archived").status_code == 400


def test_booking_retrieve(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    assert admin_api.get(f"/api/bookings/{booking.pk}").json()["id"] == str(booking.pk)
    assert admin_api.get(f"/api/bookings/{uuid.uuid4()}").status_code == 404


def _set_status(client, booking, status):
    return client.patch(f"/api/bookings/{booking.pk}/status", {"status": status}, format="json")


def test_booking_confirm_then_reopen(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    confirmed = _set_status(admin_api, booking, "confirmed")
    reopened = _set_status(admin_api, booking, "pending")

    assert confirmed.status_code == 200 and confirmed.json()["status"] == "confirmed"
    assert reopened.status_code == 200 and reopened.json()["status"] == "pending"


def test_booking_completed_is_terminal(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")
    _set_status(admin_api, booking, "confirmed")
    _set_status(admin_api, booking, "completed")

    for target in ("pending", "confirmed", "cancelled"):
        response = _set_status(admin_api, booking, target)
        assert response.status_code == 409

    booking.refresh_from_db()
    assert booking.status == "completed"


def test_booking_cannot_skip_to_completed(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    response = _set_status(admin_api, booking, "completed")

    assert response.status_code == 409
    assert "pending" in response.json()["message"]


def test_booking_same_status_is_noop(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    assert _set_status(admin_api, booking, "pending").status_code == 200


def test_booking_unknown_status_is_validation_error(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    response = _set_status(admin_api, booking, "archived")

    assert response.status_code == 400
    assert response.json()["field"] == "status"


def test_booking_status_requires_session(api_client):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    assert _set_status(api_client, booking, "confirmed").status_code == 401


def test_booking_delete(admin_api):
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    assert admin_api.delete(f"/api/bookings/{booking.pk}").status_code == 204
    assert admin_api.delete(f"/api/bookings/{booking.pk}").status_code == 404


def test_transition_table_on_model():
    booking = Booking.objects.create(customer_name="A", email="a@example.com", phone="1")

    assert booking.can_transition_to("confirmed")
    assert not booking.can_transition_to("completed")
    assert booking.cancel() is True
    assert booking.cancel() is False
    assert booking.can_transition_to("pending")
    assert not booking.can_transition_to("confirmed")
    with pytest.raises(ValueError):
        booking.transition_to("archived")


# =============================================================================
# CONTACTS
# =============================================================================

def test_contact_create_is_public_and_unread(api_client):
    response = api_client.post("/api/contacts", contact_payload(isRead=True), format="json")

    assert response.status_code == 201
    assert response.json()["isRead"] is False
    assert Contact.objects.get().is_read is False


def test_contact_requires_message(api_client):
    response = api_client.post("/api/contacts", contact_payload(message=""), format="json")

    assert response.status_code == 400
    assert response.json()["field"] == "message"


def test_contact_mark_read_is_idempotent(admin_api):
    contact = Contact.objects.create(name="B", email="b@example.com", message="Hi")

    first = admin_api.patch(f"/api/contacts/{contact.pk}/read")
    second = admin_api.patch(f"/api/contacts/{contact.pk}/read")

    assert first.status_code == 200 and second.status_code == 200
    assert second.json()["isRead"] is True
    contact.refresh_from_db()
    assert contact.is_read is True


def test_contact_list_filters_and_orders(admin_api):
    older = Contact.objects.create(name="Older", email="o@example.com", message="Hi", is_read=True)
    Contact.objects.create(name="Newer", email="n@example.com", message="Hi")
    Contact.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))

    assert [c["name"] for c in admin_api.get("/api/contacts").json()] == ["Newer", "Older"]
    assert [c["name"] for c in admin_api.get("/api/contacts?isRead=false").json()] == ["Newer"]


def test_contact_admin_routes_require_session(api_client):
    contact = Contact.objects.create(name="B", email="b@example.com", message="Hi")

    assert api_client.get("/api/contacts").status_code == 401
    assert api_client.patch(f"/api/contacts/{contact.pk}/read").status_code == 401
    assert api_client.delete(f"/api/contacts/{contact.pk}").status_code == 401


def test_contact_delete(admin_api):
    contact = Contact.objects.create(name="B", email="b@example.com", message="Hi")

    assert admin_api.delete(f"/api/contacts/{contact.pk}").status_code == 204
    assert admin_api.delete(f"/api/contacts/{contact.pk}").status_code == 404


def test_unexpected_error_returns_internal_error(api_client, monkeypatch):
    def explode(data):
        raise RuntimeError("boom")

    monkeypatch.setattr("bookings.services.create_contact", explode)

    response = api_client.post("/api/contacts", contact_payload(), format="json")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Error"}


# =============================================================================
# DASHBOARD
# =============================================================================

def test_dashboard_counts(admin_api, make_vehicle, make_package):
    make_vehicle()
    package = make_package()
    Booking.objects.create(customer_name="A", email="a@example.com", phone="1", package=package)
    Booking.objects.create(customer_name="B", email="b@example.com", phone="2", status="confirmed")
    Contact.objects.create(name="C", email="c@example.com", message="Hi")

    response = admin_api.get("/api/admin/dashboard")

    assert response.status_code == 200
    assert response.json() == {
        "totalBookings": 2,
        "totalVehicles": 1,
        "totalPackages": 1,
        "totalContacts": 1,
        "pendingBookings": 1,
        "unreadContacts": 1,
    }


def test_dashboard_reports_storage_failure(admin_api, monkeypatch):
    class BrokenManager:
        def count(self):
            raise DatabaseError("connection lost")

    class BrokenBooking:
        objects = BrokenManager()

    monkeypatch.setattr("bookings.api.views.Booking", BrokenBooking)

    response = admin_api.get("/api/admin/dashboard")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch dashboard stats"}
