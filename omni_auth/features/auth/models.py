"""Database models for identity records."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from omni_auth.db.session import Base


class User(Base):
    """User identity record.

    Email and username are always populated (derived at sign-up when the
    caller omitted them). Phone and WhatsApp numbers are stored as digit
    strings so leading zeros survive.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    country_code: Mapped[str | None] = mapped_column(String(4), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    whatsapp_country_code: Mapped[str | None] = mapped_column(
        String(4), nullable=True
    )
    whatsapp_phone_number: Mapped[str | None] = mapped_column(
        String(20), nullable=True
    )

    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        UniqueConstraint("country_code", "phone_number", name="unique_phone_pair"),
        UniqueConstraint(
            "whatsapp_country_code",
            "whatsapp_phone_number",
            name="unique_whatsapp_pair",
        ),
    )


# Case-insensitive uniqueness backs up the application-level check.
Index("unique_email_lower", func.lower(User.email), unique=True)
Index("unique_username_lower", func.lower(User.username), unique=True)
