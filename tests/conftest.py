"""Shared fixtures for SentiScope tests."""

import pytest
from sentiscope.core.models import AspectRow


def make_row(**overrides):
    """Aspect row with sensible defaults."""
    fields = {
        "review_id": "R1",
        "hotel_id": "H1",
        "hotel_name": "Hotel A",
        "language": "en",
        "review_date": "2024-01-01",
        "rating": 4,
        "aspect": "Service",
        "sentiment": "positive",
        "confidence": 0.9,
        "review_text": "Friendly staff",
    }
    fields.update(overrides)
    return AspectRow(**fields)


@pytest.fixture
def sample_rows():
    """Small mixed dataset over two hotels and three dates."""
    return [
        make_row(review_id="R1", hotel_name="Hotel A", aspect="Service", sentiment="positive",
                 review_date="2024-01-02", rating=5, review_text="Friendly staff and clean room"),
        make_row(review_id="R1", hotel_name="Hotel A", aspect="Cleanliness", sentiment="positive",
                 review_date="2024-01-02", rating=5, review_text="Friendly staff and clean room"),
        make_row(review_id="R2", hotel_name="Hotel A", aspect="Service", sentiment="negative",
                 review_date="2024-01-01", rating=2, language="id", review_text="Pelayanan lambat"),
        make_row(review_id="R3", hotel_name="Hotel B", hotel_id="H2", aspect="Food", sentiment="neutral",
                 review_date="2024-01-03", rating=0, review_text="Breakfast was average"),
    ]
