import json
from sqlalchemy import String, Text, Numeric, SmallInteger, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from app.db.session import Base

Money = Numeric(10, 2, asdecimal=False)


class CommonSetting(Base):
    """Singleton row: company profile plus every global surcharge."""
    __tablename__ = "common_settings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    company_name: Mapped[str] = mapped_column(String(100))
    company_logo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str] = mapped_column(Text, default="")
    booking_call_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    telephone_number: Mapped[str] = mapped_column(String(20), default="")
    email: Mapped[str] = mapped_column(String(100), default="")
    website: Mapped[str | None] = mapped_column(String(100), nullable=True)

    holidays: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON list of YYYY-MM-DD
    holiday_surcharge: Mapped[float | None] = mapped_column(Money, nullable=True)
    tunnel_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    gratuity: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)  # percent of base fare
    stop_over_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    infant_front_facing_seat_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    infant_rear_facing_seat_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    infant_booster_seat_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    night_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    night_charge_start_time: Mapped[str | None] = mapped_column(String(8), nullable=True)  # HH:MM
    night_charge_end_time: Mapped[str | None] = mapped_column(String(8), nullable=True)
    hidden_night_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    hidden_night_charge_start_time: Mapped[str | None] = mapped_column(String(8), nullable=True)
    hidden_night_charge_end_time: Mapped[str | None] = mapped_column(String(8), nullable=True)
    snow_storm_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    rush_hour_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    extra_luggage_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    pets_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    # Percentages of the total amount
    convenience_fee: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    cash_discount: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    paypal_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    square_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)
    credit_card_charge: Mapped[float | None] = mapped_column(Money, nullable=True, default=0.0)

    status: Mapped[int] = mapped_column(SmallInteger, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @property
    def holiday_list(self) -> list[str]:
        raw = (self.holidays or "").strip()
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            return [s.strip() for s in raw.split(",") if s.strip()]
        if isinstance(parsed, list):
            return [str(s).strip() for s in parsed if str(s).strip()]
        return [str(parsed)]
