"""
Synthetic mosque generator.

Stands in for a real data source until mosques are loaded into Postgres.
Names, addresses and facilities come from fixed tables indexed by position;
only the placement around the query point is random, and that random stream
is seeded from (seed, coordinate) so a given query always yields the same set.
"""

import random

# ──────────────────────────────────────────────
# Fixed mosque definitions
# ──────────────────────────────────────────────

MOSQUES = [
    {
        "name": "Masjid Al-Ikhlas",
        "address": "Jl. Merdeka No. 12",
        "has_ac": True,
        "ac_status": "working",
        "wudhu_cleanliness": "very_clean",
        "separate_wudhu_areas": True,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": True,
        "prayer_mats_provided": True,
        "shoe_storage": "shelves",
        "open_24_hours": True,
        "phone": "021-5550112",
        "friday_khutbah_time": "11:45",
    },
    {
        "name": "Masjid Nurul Huda",
        "address": "Jl. Kebon Jeruk Raya No. 45",
        "has_ac": True,
        "ac_status": "partial",
        "wudhu_cleanliness": "clean",
        "separate_wudhu_areas": True,
        "parking_available": False,
        "bike_parking_available": True,
        "wheelchair_accessible": False,
        "prayer_mats_provided": True,
        "shoe_storage": "lockers",
        "open_24_hours": False,
        "friday_khutbah_time": "11:50",
    },
    {
        "name": "Masjid At-Taqwa",
        "address": "Jl. Sudirman Kav. 8",
        "has_ac": False,
        "wudhu_cleanliness": "average",
        "separate_wudhu_areas": False,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": False,
        "prayer_mats_provided": False,
        "shoe_storage": "floor_only",
        "open_24_hours": False,
    },
    {
        "name": "Masjid Raya Al-Falah",
        "address": "Jl. Gatot Subroto No. 101",
        "has_ac": True,
        "ac_status": "working",
        "wudhu_cleanliness": "clean",
        "separate_wudhu_areas": True,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": True,
        "prayer_mats_provided": True,
        "shoe_storage": "shelves",
        "open_24_hours": True,
        "website": "https://masjidalfalah.example.org",
        "friday_khutbah_time": "11:40",
        "description": "Masjid raya dengan kapasitas 2.000 jamaah dan perpustakaan Islam.",
    },
    {
        "name": "Masjid Baitur Rahman",
        "address": "Jl. Cempaka Putih Tengah No. 3",
        "has_ac": True,
        "ac_status": "broken",
        "wudhu_cleanliness": "needs_cleaning",
        "separate_wudhu_areas": False,
        "parking_available": False,
        "bike_parking_available": True,
        "wheelchair_accessible": False,
        "prayer_mats_provided": True,
        "shoe_storage": "none",
        "open_24_hours": False,
    },
    {
        "name": "Masjid Al-Muhajirin",
        "address": "Jl. Tebet Barat Dalam No. 27",
        "has_ac": False,
        "wudhu_cleanliness": "clean",
        "separate_wudhu_areas": True,
        "parking_available": True,
        "bike_parking_available": False,
        "wheelchair_accessible": True,
        "prayer_mats_provided": True,
        "shoe_storage": "shelves",
        "open_24_hours": False,
        "phone": "021-8290334",
    },
    {
        "name": "Masjid Jami Al-Hidayah",
        "address": "Jl. Pramuka No. 60",
        "has_ac": True,
        "ac_status": "working",
        "wudhu_cleanliness": "very_clean",
        "separate_wudhu_areas": True,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": False,
        "prayer_mats_provided": True,
        "shoe_storage": "lockers",
        "open_24_hours": True,
        "friday_khutbah_time": "11:55",
    },
    {
        "name": "Masjid Darussalam",
        "address": "Jl. Kemang Raya No. 9",
        "has_ac": True,
        "ac_status": None,
        "wudhu_cleanliness": None,
        "separate_wudhu_areas": None,
        "parking_available": False,
        "bike_parking_available": False,
        "wheelchair_accessible": False,
        "prayer_mats_provided": False,
        "shoe_storage": None,
        "open_24_hours": False,
    },
    {
        "name": "Masjid Al-Amanah",
        "address": "Jl. Rawamangun Muka No. 18",
        "has_ac": False,
        "wudhu_cleanliness": "average",
        "separate_wudhu_areas": False,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": True,
        "prayer_mats_provided": True,
        "shoe_storage": "floor_only",
        "open_24_hours": True,
    },
    {
        "name": "Masjid Istiqlal Mini",
        "address": "Jl. Veteran No. 2",
        "has_ac": True,
        "ac_status": "working",
        "wudhu_cleanliness": "clean",
        "separate_wudhu_areas": True,
        "parking_available": True,
        "bike_parking_available": True,
        "wheelchair_accessible": True,
        "prayer_mats_provided": True,
        "shoe_storage": "shelves",
        "open_24_hours": False,
        "friday_khutbah_time": "11:45",
    },
]

# Offset magnitude (degrees) applied to each axis
MIN_OFFSET_DEG = 0.01
MAX_OFFSET_DEG = 0.05

OPTIONAL_FIELDS = (
    "ac_status",
    "wudhu_cleanliness",
    "separate_wudhu_areas",
    "shoe_storage",
    "phone",
    "website",
    "google_maps_link",
    "image_url",
    "description",
    "friday_khutbah_time",
)


def _offset(rng: random.Random) -> float:
    magnitude = rng.uniform(MIN_OFFSET_DEG, MAX_OFFSET_DEG)
    return magnitude if rng.random() < 0.5 else -magnitude


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def create_mock_mosques(lat: float, lng: float, seed: int = 42, count: int = 8) -> list[dict]:
    """
    Generate `count` mosques scattered 0.01-0.05 degrees around (lat, lng).

    Records carry no `distance`; the resolver computes it.
    """
    if not 1 <= count <= len(MOSQUES):
        raise ValueError(f"count must be between 1 and {len(MOSQUES)}")

    rng = random.Random(f"{seed}:{lat:.6f}:{lng:.6f}")
    mosques = []
    for idx, base in enumerate(MOSQUES[:count], start=1):
        m_lat = round(_clamp(lat + _offset(rng), -90.0, 90.0), 6)
        m_lng = round(_clamp(lng + _offset(rng), -180.0, 180.0), 6)

        record = {field: None for field in OPTIONAL_FIELDS}
        record.update(base)
        record["id"] = idx
        record["latitude"] = m_lat
        record["longitude"] = m_lng
        if not record["has_ac"]:
            record["ac_status"] = None
        record["google_maps_link"] = (
            f"https://www.google.com/maps/search/?api=1&query={m_lat},{m_lng}"
        )
        mosques.append(record)

    return mosques
