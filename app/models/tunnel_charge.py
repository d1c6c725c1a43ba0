from sqlalchemy import Date, Numeric, SmallInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date, datetime, timezone
from app.db.session import Base

class TunnelCharge(Base):
    __tablename__ = "tunnel_charges"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    charge_start_date: Mapped[date] = mapped_column(Date)
    charge_end_date: Mapped[date] = mapped_column(Date)
    charge_amount: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))
    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
