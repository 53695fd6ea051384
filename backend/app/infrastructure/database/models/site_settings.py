"""SQLAlchemy ORM models for the fixed-key singletons (theme, contact details)."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class ThemeSettingsModel(Base):
    """ORM model — maps to the 'theme_settings' table (one row, id='default')."""

    __tablename__ = "theme_settings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    site_name: Mapped[str] = mapped_column(Text, nullable=False)
    logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    favicon: Mapped[str | None] = mapped_column(Text, nullable=True)
    primary_color: Mapped[str] = mapped_column(String(7), nullable=False)
    secondary_color: Mapped[str] = mapped_column(String(7), nullable=False)
    gradient_direction: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


class ContactInfoModel(Base):
    """ORM model — maps to the 'contact_info' table (one row, id='default')."""

    __tablename__ = "contact_info"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    phone: Mapped[str] = mapped_column(Text, default="", nullable=False)
    email: Mapped[str] = mapped_column(Text, default="", nullable=False)
    address: Mapped[str] = mapped_column(Text, default="", nullable=False)
    city: Mapped[str] = mapped_column(Text, default="", nullable=False)
    state: Mapped[str] = mapped_column(Text, default="", nullable=False)
    pincode: Mapped[str] = mapped_column(Text, default="", nullable=False)
    country: Mapped[str] = mapped_column(Text, default="", nullable=False)
    facebook: Mapped[str] = mapped_column(Text, default="", nullable=False)
    twitter: Mapped[str] = mapped_column(Text, default="", nullable=False)
    linkedin: Mapped[str] = mapped_column(Text, default="", nullable=False)
    instagram: Mapped[str] = mapped_column(Text, default="", nullable=False)
    youtube: Mapped[str] = mapped_column(Text, default="", nullable=False)
    whatsapp: Mapped[str] = mapped_column(Text, default="", nullable=False)
    telegram: Mapped[str] = mapped_column(Text, default="", nullable=False)
    github: Mapped[str] = mapped_column(Text, default="", nullable=False)
    behance: Mapped[str] = mapped_column(Text, default="", nullable=False)
    dribbble: Mapped[str] = mapped_column(Text, default="", nullable=False)
    map_embed_code: Mapped[str] = mapped_column(Text, default="", nullable=False)
    page_title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    page_description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    office_title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    office_description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
