"""
Starter catalog content for a fresh database.
"""
import logging

from django.db import transaction

from .models import Package, SafariPhoto, Vehicle

logger = logging.getLogger(__name__)

VEHICLES = [
    {
        "name": "Suzuki Alto",
        "description": "Compact and efficient, perfect for city tours or solo travelers on a budget.",
        "capacity": "3 Passengers",
        "features": ["Air Conditioning", "Compact", "Budget Friendly"],
    },
    {
        "name": "Toyota Premio",
        "description": "Comfortable sedan offering a smooth ride for small families or business travelers.",
        "capacity": "4 Passengers",
        "features": ["Air Conditioning", "Comfortable Seating", "Ample Trunk Space"],
    },
    {
        "name": "Toyota Noah",
        "description": "Spacious minivan ideal for group safaris or family trips, offering excellent visibility.",
        "capacity": "7 Passengers",
        "features": ["Spacious Interior", "Air Conditioning", "Perfect for Groups", "Good Ground Clearance"],
    },
]

PACKAGES = [
    {
        "name": "Maasai Mara Experience",
        "description": "Experience the magic of the Maasai Mara. Witness the Great Migration and enjoy luxury camping.",
        "duration": "3 Days, 2 Nights",
        "price": "Ksh 150,000",
        "itinerary": [
            "Day 1: Arrival and Evening Game Drive",
            "Day 2: Full Day Game Drive & Sundowner",
            "Day 3: Morning Game Drive and Departure",
        ],
        "image_url": "https://images.unsplash.com/photo-1516426122078-c23e76319801?q=80&w=2068&auto=format&fit=crop",
        "is_popular": True,
    },
    {
        "name": "Amboseli & Tsavo Adventure",
        "description": "Iconic views of Mount Kilimanjaro and massive elephant herds in this dual-park adventure.",
        "duration": "5 Days, 4 Nights",
        "price": "Ksh 230,000",
        "itinerary": [
            "Day 1-2: Amboseli Exploration",
            "Day 3: Transfer to Tsavo West",
            "Day 4: Tsavo Game Drives",
            "Day 5: Departure",
        ],
        "image_url": "https://images.unsplash.com/photo-1521651201144-634f700b36ef?q=80&w=2070&auto=format&fit=crop",
        "is_popular": False,
    },
]

PHOTOS = [
    {
        "title": "Lion Pride at Sunset",
        "description": "Magnificent lion pride resting during golden hour in Maasai Mara",
        "image_url": "https://images.unsplash.com/photo-1546182990-dffeafbe841d?w=800&auto=format&fit=crop",
        "category": "Wildlife",
        "location": "Maasai Mara, Kenya",
        "is_featured": True,
    },
    {
        "title": "Elephant Herd at Amboseli",
        "description": "Large elephant family with Mount Kilimanjaro in the background",
        "image_url": "https://images.unsplash.com/photo-1557050543-4d5f4e07ef46?w=800&auto=format&fit=crop",
        "category": "Wildlife",
        "location": "Amboseli National Park",
        "is_featured": True,
    },
    {
        "title": "Hot Air Balloon Safari",
        "description": "Early morning balloon ride over the savannah",
        "image_url": "https://images.unsplash.com/photo-1504280390367-361c6d9f38f4?w=800&auto=format&fit=crop",
        "category": "Adventure",
        "location": "Maasai Mara",
        "is_featured": False,
    },
]


@transaction.atomic
def seed_catalog():
    """
    Insert starter rows into each empty catalog table.

    Tables that already hold rows are left alone.

    Returns:
        Dict mapping table label to the number of rows created
    """
    created = {}
    for model, rows in ((Vehicle, VEHICLES), (Package, PACKAGES), (SafariPhoto, PHOTOS)):
        label = model._meta.verbose_name_plural
        if model.objects.exists():
            created[label] = 0
            continue
        for row in rows:
            model.objects.create(**row)
        created[label] = len(rows)
        logger.info(f"Seeded {len(rows)} {label}")
    return created
