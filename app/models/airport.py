from sqlalchemy import String, Text, Numeric, SmallInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from app.db.session import Base

class Airport(Base):
    __tablename__ = "airports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    from_tax_toll: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    to_tax_toll: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    status: Mapped[int] = mapped_column(SmallInteger, default=1)  # 0=Inactive, 1=Active
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
