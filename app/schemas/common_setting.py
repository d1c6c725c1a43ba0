from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

TIME_24H = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
Money = Optional[float]
Percent = Optional[float]


class _SettingFields(BaseModel):
    company_logo: Optional[str] = Field(None, max_length=255)  # stored path or URL
    booking_call_number: Optional[str] = Field(None, min_length=10, max_length=20)
    website: Optional[str] = Field(None, max_length=100)
    holidays: Optional[List[date]] = None
    holiday_surcharge: Money = Field(None, ge=0)
    tunnel_charge: Money = Field(None, ge=0)
    gratuity: Percent = Field(None, ge=0, le=100)
    stop_over_charge: Money = Field(None, ge=0)
    infant_front_facing_seat_charge: Money = Field(None, ge=0)
    infant_rear_facing_seat_charge: Money = Field(None, ge=0)
    infant_booster_seat_charge: Money = Field(None, ge=0)
    night_charge: Money = Field(None, ge=0)
    night_charge_start_time: Optional[str] = Field(None, pattern=TIME_24H)
    night_charge_end_time: Optional[str] = Field(None, pattern=TIME_24H)
    hidden_night_charge: Money = Field(None, ge=0)
    hidden_night_charge_start_time: Optional[str] = Field(None, pattern=TIME_24H)
    hidden_night_charge_end_time: Optional[str] = Field(None, pattern=TIME_24H)
    snow_storm_charge: Money = Field(None, ge=0)
    rush_hour_charge: Money = Field(None, ge=0)
    extra_luggage_charge: Money = Field(None, ge=0)
    pets_charge: Money = Field(None, ge=0)
    convenience_fee: Percent = Field(None, ge=0, le=100)
    cash_discount: Percent = Field(None, ge=0, le=100)
    paypal_charge: Percent = Field(None, ge=0, le=100)
    square_charge: Percent = Field(None, ge=0, le=100)
    credit_card_charge: Percent = Field(None, ge=0, le=100)


class CommonSettingIn(_SettingFields):
    company_name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1)
    telephone_number: str = Field(min_length=10, max_length=20)
    email: str = Field(max_length=100, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    status: int = Field(1, ge=0, le=1)


class CommonSettingPatch(_SettingFields):
    company_name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, min_length=1)
    telephone_number: Optional[str] = Field(None, min_length=10, max_length=20)
    email: Optional[str] = Field(None, max_length=100, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    status: Optional[int] = Field(None, ge=0, le=1)


class CommonSettingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    company_logo: Optional[str] = None
    address: str
    booking_call_number: Optional[str] = None
    telephone_number: str
    email: str
    website: Optional[str] = None
    holidays: List[str] = Field(default_factory=list, validation_alias="holiday_list")
    holiday_surcharge: Money = None
    tunnel_charge: Money = None
    gratuity: Percent = None
    stop_over_charge: Money = None
    infant_front_facing_seat_charge: Money = None
    infant_rear_facing_seat_charge: Money = None
    infant_booster_seat_charge: Money = None
    night_charge: Money = None
    night_charge_start_time: Optional[str] = None
    night_charge_end_time: Optional[str] = None
    hidden_night_charge: Money = None
    hidden_night_charge_start_time: Optional[str] = None
    hidden_night_charge_end_time: Optional[str] = None
    snow_storm_charge: Money = None
    rush_hour_charge: Money = None
    extra_luggage_charge: Money = None
    pets_charge: Money = None
    convenience_fee: Percent = None
    cash_discount: Percent = None
    paypal_charge: Percent = None
    square_charge: Percent = None
    credit_card_charge: Percent = None
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
