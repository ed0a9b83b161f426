import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from catalog.models import Package, SafariPhoto, Vehicle

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def admin_account(settings):
    settings.ADMIN_USERNAME = ADMIN_USERNAME
    settings.ADMIN_PASSWORD = ADMIN_PASSWORD
    settings.ADMIN_PASSWORD_HASH = ""
    settings.LEAD_NOTIFICATIONS_ENABLED = False
    settings.TESTIMONIALS_REQUIRE_APPROVAL = False
    return settings


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_api(db):
    client = APIClient()
    response = client.post(
        "/api/login", {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}, format="json"
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def make_vehicle(db):
    def _make(**overrides):
        data = {
            "name": "Toyota Noah",
            "description": "Spacious minivan for group safaris.",
            "capacity": "7 Passengers",
            "features": ["Air Conditioning", "Pop-up Roof"],
        }
        data.update(overrides)
        return Vehicle.objects.create(**data)
    return _make


@pytest.fixture
def make_package(db):
    def _make(**overrides):
        data = {
            "name": "Maasai Mara Experience",
            "description": "Three days in the Mara.",
            "duration": "3 Days, 2 Nights",
            "price": "Ksh 150,000",
            "itinerary": ["Day 1: Arrival", "Day 2: Game Drive", "Day 3: Departure"],
        }
        data.update(overrides)
        return Package.objects.create(**data)
    return _make


@pytest.fixture
def make_photo(db):
    def _make(**overrides):
        data = {
            "title": "Lion Pride at Sunset",
            "image_url": "/uploads/lion.jpg",
            "category": "Wildlife",
        }
        data.update(overrides)
        return SafariPhoto.objects.create(**data)
    return _make
