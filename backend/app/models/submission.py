"""SQLAlchemy model for the mosque_submissions table (schema reference + DDL for the seed script)."""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, Float, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column
from app.models.mosque import Base


class MosqueSubmission(Base):
    __tablename__ = "mosque_submissions"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()")
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)
    has_ac: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ac_status: Mapped[str | None] = mapped_column(String(20))
    wudhu_cleanliness: Mapped[str | None] = mapped_column(String(20))
    separate_wudhu_areas: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    parking_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bike_parking_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    wheelchair_accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    prayer_mats_provided: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    shoe_storage: Mapped[str | None] = mapped_column(String(20))
    open_24_hours: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    phone: Mapped[str | None] = mapped_column(String(50))
    website: Mapped[str | None] = mapped_column(String(500))
    google_maps_link: Mapped[str | None] = mapped_column(String(500))
    image_url: Mapped[str | None] = mapped_column(String(500))
    description: Mapped[str | None] = mapped_column(Text)
    friday_khutbah_time: Mapped[str | None] = mapped_column(String(50))
    # Submissions are verified by a moderator before they reach `mosques`
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", server_default="pending"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<MosqueSubmission {self.name} status={self.status}>"
