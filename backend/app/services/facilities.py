"""Localized (Indonesian) facility labels shown on mosque cards and the detail view."""

from urllib.parse import quote

UNKNOWN = {"text": "Belum ada informasi", "tone": "neutral", "icon": "❓"}

AC_LABELS = {
    "working": {"text": "AC berfungsi dengan baik", "tone": "good", "icon": "✅"},
    "broken": {"text": "AC rusak/tidak berfungsi", "tone": "bad", "icon": "❌"},
    "partial": {"text": "AC sebagian ruangan", "tone": "warning", "icon": "⚠️"},
}
NO_AC = {"text": "Tidak ada AC", "tone": "neutral", "icon": "❄️"}
AC_UNSPECIFIED = {"text": "AC tersedia", "tone": "info", "icon": "❄️"}

WUDHU_LABELS = {
    "very_clean": {"text": "Sangat bersih", "tone": "good", "icon": "⭐"},
    "clean": {"text": "Bersih", "tone": "good", "icon": "✨"},
    "average": {"text": "Cukup bersih", "tone": "warning", "icon": "👌"},
    "needs_cleaning": {"text": "Perlu dibersihkan", "tone": "bad", "icon": "⚠️"},
}

SHOE_STORAGE_LABELS = {
    "shelves": "Rak sepatu tersedia",
    "lockers": "Loker sepatu tersedia",
    "floor_only": "Lantai saja",
    "none": "Tidak ada tempat khusus",
}


def ac_label(has_ac: bool, ac_status: str | None) -> dict:
    # ac_status is meaningless without AC
    if not has_ac:
        return dict(NO_AC)
    return dict(AC_LABELS.get(ac_status, AC_UNSPECIFIED))


def wudhu_label(cleanliness: str | None) -> dict:
    return dict(WUDHU_LABELS.get(cleanliness, UNKNOWN))


def shoe_storage_label(storage: str | None) -> str:
    return SHOE_STORAGE_LABELS.get(storage, UNKNOWN["text"])


def describe_facilities(mosque: dict) -> dict:
    return {
        "ac": ac_label(mosque.get("has_ac", False), mosque.get("ac_status")),
        "wudhu": wudhu_label(mosque.get("wudhu_cleanliness")),
        "shoe_storage": shoe_storage_label(mosque.get("shoe_storage")),
    }


def directions_url(mosque: dict) -> str:
    """The mosque's own Google Maps link, or a search for its address."""
    if mosque.get("google_maps_link"):
        return mosque["google_maps_link"]
    return "https://www.google.com/maps/search/?api=1&query=" + quote(mosque["address"], safe="")
