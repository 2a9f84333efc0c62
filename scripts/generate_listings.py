#!/usr/bin/env python3
"""
Generate a deterministic sample listing dataset.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: overwrites the output file
- Realism-lite: nightly price correlated with city band, type and size

The output is the camelCase JSON array read by
``stayfinder.adapters.json_listing_source.load_listings``.

Usage:
    python scripts/generate_listings.py [output.json]
"""

from __future__ import annotations

import json
import random
import sys
from datetime import date, timedelta
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stayfinder.adapters.json_listing_source import parse_listings
from stayfinder.domain.listing import PropertyType


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_LISTINGS = 48
DEFAULT_OUTPUT = Path("data/listings.json")


# ==============================================================================
# Catalog Data
# ==============================================================================

# Cities grouped by nightly price band (whole currency units)
CITIES = {
    "budget": {
        "cities": [("Yerevan", "Armenia"), ("Tbilisi", "Georgia"), ("Porto", "Portugal")],
        "base_price_min": 40,
        "base_price_max": 90,
    },
    "mid_range": {
        "cities": [("Berlin", "Germany"), ("Barcelona", "Spain"), ("Prague", "Czechia")],
        "base_price_min": 80,
        "base_price_max": 160,
    },
    "premium": {
        "cities": [("Paris", "France"), ("London", "United Kingdom"), ("New York", "USA")],
        "base_price_min": 150,
        "base_price_max": 320,
    },
}

AREAS = ["Old Town", "City Center", "Riverside", "Museum Quarter", "Harbour", "Hillside"]

AMENITIES = [
    "wifi",
    "kitchen",
    "parking",
    "pool",
    "petFriendly",
    "airConditioning",
    "washer",
    "tv",
    "heating",
    "workspace",
]

TITLES = {
    PropertyType.APARTMENT: ["Bright loft", "Cozy studio", "Modern flat", "Sunny apartment"],
    PropertyType.HOUSE: ["Family house", "Garden cottage", "Townhouse", "Stone villa"],
    PropertyType.HOTEL: ["Boutique room", "Design hotel suite", "Classic double room"],
}

REVIEWERS = ["Anna", "Marco", "Lena", "Tigran", "Sofia", "James", "Nino", "Pierre"]
REVIEW_TEXTS = [
    "Great location and very clean.",
    "Host was responsive, would stay again.",
    "Exactly like the photos.",
    "A bit noisy at night but comfortable.",
    "Perfect for a weekend trip.",
]


# ==============================================================================
# Listing Generation
# ==============================================================================


def nightly_price(band: dict, property_type: PropertyType, bedrooms: int) -> int:
    """
    Calculate nightly price from city band, type and size.

    - Houses cost more than apartments, hotels sit in between
    - Each bedroom beyond the first adds ~20%
    - Rounded to the nearest 5
    """
    base = random.randint(band["base_price_min"], band["base_price_max"])
    type_factor = {
        PropertyType.APARTMENT: 1.0,
        PropertyType.HOTEL: 1.15,
        PropertyType.HOUSE: 1.35,
    }[property_type]
    price = base * type_factor * (1 + 0.2 * (bedrooms - 1))
    return max(25, int(round(price / 5)) * 5)


def generate_reviews(listing_id: str, count: int) -> list[dict]:
    start = date(2025, 1, 1)
    return [
        {
            "id": f"{listing_id}-r{i}",
            "authorName": random.choice(REVIEWERS),
            "rating": random.choice([3, 4, 4, 5, 5, 5]),
            "date": (start + timedelta(days=random.randint(0, 540))).isoformat(),
            "text": random.choice(REVIEW_TEXTS),
        }
        for i in range(1, count + 1)
    ]


def generate_listing(index: int) -> dict:
    """Generate a single random listing record."""
    band_name = random.choice(list(CITIES))
    band = CITIES[band_name]
    city, country = random.choice(band["cities"])

    property_type = random.choices(list(PropertyType), weights=[5, 3, 2], k=1)[0]
    bedrooms = 1 if property_type is PropertyType.HOTEL else random.randint(1, 4)
    listing_id = f"lst-{index:03d}"

    return {
        "id": listing_id,
        "title": f"{random.choice(TITLES[property_type])} in {city}",
        "city": city,
        "country": country,
        "area": random.choice(AREAS),
        "type": property_type.value,
        "pricePerNight": nightly_price(band, property_type, bedrooms),
        "rating": round(random.uniform(3.6, 5.0), 2),
        "reviewsCount": random.randint(0, 480),
        "maxGuests": bedrooms * 2,
        "bedrooms": bedrooms,
        "baths": max(1, bedrooms - random.randint(0, 1)),
        "amenities": sorted(random.sample(AMENITIES, k=random.randint(3, 8))),
        "fees": {
            "cleaning": random.choice([0, 15, 25, 40]),
            "service": random.choice([10, 15, 20]),
            "discountPercent": random.choice([0, 0, 0, 5, 10, 15]),
        },
        "instantBook": random.random() < 0.6,
        "freeCancellation": random.random() < 0.5,
        "reviews": generate_reviews(listing_id, random.randint(0, 4)),
        "description": f"A {property_type.value} in the {band_name.replace('_', '-')} part of our {city} catalog.",
    }


def generate_listings(
    output: Path = DEFAULT_OUTPUT, num_listings: int = NUM_LISTINGS, seed: int = RANDOM_SEED
) -> None:
    """
    Write the sample dataset.

    Args:
        output: Destination JSON file
        num_listings: Number of listings to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Generating {num_listings} listings (seed={seed})...")
    records = [generate_listing(i) for i in range(1, num_listings + 1)]
    document = json.dumps(records, indent=2, ensure_ascii=False)

    # Fail early if the generator drifts from the loader's schema
    listings = parse_listings(document)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    print(f"✅ Wrote {len(listings)} listings to {output}")

    print("\n📊 Sample listings:")
    for i, listing in enumerate(listings[:5], 1):
        print(
            f"   {i}. {listing.title} - ${listing.price_per_night}/night "
            f"({listing.rating:.2f}★, {listing.max_guests} guests)"
        )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT
    try:
        generate_listings(target)
    except Exception as e:
        print(f"❌ Error generating listings: {e}", file=sys.stderr)
        sys.exit(1)
