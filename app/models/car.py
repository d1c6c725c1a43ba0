from sqlalchemy import String, Text, Integer, Numeric, SmallInteger, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime, timezone
from app.db.session import Base

class Car(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    regular_name: Mapped[str] = mapped_column(String(100))
    short_name: Mapped[str] = mapped_column(String(50), default="")
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    car_photo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    car_features: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_fare: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    minimum_fare: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0.0)
    small_luggage_capacity: Mapped[int] = mapped_column(Integer, default=0)
    large_luggage_capacity: Mapped[int] = mapped_column(Integer, default=0)
    extra_luggage_capacity: Mapped[int] = mapped_column(Integer, default=0)
    num_of_passengers: Mapped[int] = mapped_column(Integer, default=1)
    is_child_seat: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    slab_fares: Mapped[list["CarSlabFare"]] = relationship(
        back_populates="car", cascade="all, delete-orphan", order_by="CarSlabFare.id"
    )


class CarSlabFare(Base):
    __tablename__ = "car_slab_fares"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(Integer, ForeignKey("cars.id", ondelete="CASCADE"), index=True)
    slab_id: Mapped[int] = mapped_column(Integer, ForeignKey("slabs.id", ondelete="CASCADE"), index=True)
    fare_amount: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))
    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    car: Mapped[Car] = relationship(back_populates="slab_fares")
    slab = relationship("Slab", lazy="joined")
