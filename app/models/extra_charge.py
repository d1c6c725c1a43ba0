from sqlalchemy import String, Text, Numeric, SmallInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from app.db.session import Base

class ExtraCharge(Base):
    __tablename__ = "extra_charges"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    area_name: Mapped[str] = mapped_column(String(100), index=True)
    zip_codes: Mapped[str] = mapped_column(Text, default="")
    extra_charge: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    extra_toll_charge: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
