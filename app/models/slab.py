from sqlalchemy import Numeric, SmallInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from app.db.session import Base

class Slab(Base):
    """A pricing bracket upper bound. The per-car rate lives on CarSlabFare."""
    __tablename__ = "slabs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    slab_value: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))
    slab_unit: Mapped[int] = mapped_column(SmallInteger, default=0)  # 0=Mile, 1=Hour
    slab_type: Mapped[int] = mapped_column(SmallInteger, default=0)  # 0=Distance, 1=HourlyService
    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
