"""SQLAlchemy model for the mosques table (schema reference + DDL for the seed script)."""

from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Mosque(Base):
    __tablename__ = "mosques"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    longitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)

    # Facilities
    has_ac: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ac_status: Mapped[str | None] = mapped_column(String(20))        # working | broken | partial
    wudhu_cleanliness: Mapped[str | None] = mapped_column(String(20))  # very_clean .. needs_cleaning
    separate_wudhu_areas: Mapped[bool | None] = mapped_column(Boolean)
    parking_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bike_parking_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    wheelchair_accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    prayer_mats_provided: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    shoe_storage: Mapped[str | None] = mapped_column(String(20))     # shelves | lockers | floor_only | none
    open_24_hours: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Contact / extras
    phone: Mapped[str | None] = mapped_column(String(50))
    website: Mapped[str | None] = mapped_column(String(500))
    google_maps_link: Mapped[str | None] = mapped_column(String(500))
    image_url: Mapped[str | None] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(Text)
    friday_khutbah_time: Mapped[str | None] = mapped_column(String(50))

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Mosque {self.name} ({self.latitude}, {self.longitude})>"
