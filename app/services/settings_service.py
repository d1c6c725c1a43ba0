import json
import logging
from datetime import date

from sqlalchemy.orm import Session

from app.core.errors import ConfigurationError, DuplicateEntryError, NotFoundError
from app.models.common_setting import CommonSetting
from app.schemas.common_setting import CommonSettingIn, CommonSettingPatch
from app.services.fare_calculator import PricingSettings

logger = logging.getLogger(__name__)


def get_common_setting(db: Session) -> CommonSetting | None:
    return db.query(CommonSetting).order_by(CommonSetting.id.asc()).first()


def _dump(body) -> dict:
    data = body.model_dump(exclude_unset=True)
    if "holidays" in data:
        days = data["holidays"]
        data["holidays"] = json.dumps([d.isoformat() for d in days]) if days is not None else None
    return data


def create_common_setting(db: Session, body: CommonSettingIn) -> CommonSetting:
    if get_common_setting(db) is not None:
        raise DuplicateEntryError("Common settings already exist. Use update instead.")
    s = CommonSetting(**_dump(body))
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def update_common_setting(db: Session, body: CommonSettingPatch) -> CommonSetting:
    s = get_common_setting(db)
    if s is None:
        raise NotFoundError("Common settings not found. Create them first.")
    for key, value in _dump(body).items():
        setattr(s, key, value)
    db.commit()
    db.refresh(s)
    return s


def _parse_holidays(values: list[str]) -> frozenset:
    days = set()
    for v in values:
        try:
            days.add(date.fromisoformat(v[:10]))
        except ValueError:
            logger.warning("Ignoring malformed holiday %r", v)
    return frozenset(days)


def _num(value) -> float:
    return float(value) if value is not None else 0.0


def get_pricing_settings(db: Session) -> PricingSettings:
    s = get_common_setting(db)
    if s is None:
        raise ConfigurationError("Common settings are not configured.")
    return PricingSettings(
        gratuity=_num(s.gratuity),
        tunnel_charge=_num(s.tunnel_charge),
        holidays=_parse_holidays(s.holiday_list),
        holiday_surcharge=_num(s.holiday_surcharge),
        night_charge=_num(s.night_charge),
        night_charge_start_time=s.night_charge_start_time,
        night_charge_end_time=s.night_charge_end_time,
        hidden_night_charge=_num(s.hidden_night_charge),
        hidden_night_charge_start_time=s.hidden_night_charge_start_time,
        hidden_night_charge_end_time=s.hidden_night_charge_end_time,
        stop_over_charge=_num(s.stop_over_charge),
        infant_front_facing_seat_charge=_num(s.infant_front_facing_seat_charge),
        infant_rear_facing_seat_charge=_num(s.infant_rear_facing_seat_charge),
        infant_booster_seat_charge=_num(s.infant_booster_seat_charge),
        cash_discount=_num(s.cash_discount),
        paypal_charge=_num(s.paypal_charge),
        square_charge=_num(s.square_charge),
        credit_card_charge=_num(s.credit_card_charge),
    )
