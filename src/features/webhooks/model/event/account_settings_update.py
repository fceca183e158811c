from pydantic import AliasChoices, BaseModel, Field

from features.webhooks.model.change_value import ChangeValue


class WeeklyOperatingDay(BaseModel):
    day_of_week: str | None = None  # MONDAY, TUESDAY, ...
    open_time: str | None = None  # HHMM
    close_time: str | None = None  # HHMM


class Holiday(BaseModel):
    date: str | None = None  # YYYY-MM-DD
    start_time: str | None = None  # HHMM
    end_time: str | None = None  # HHMM


class CallHours(BaseModel):
    status: str | None = None
    timezone_id: str | None = None
    weekly_operating_hours: list[WeeklyOperatingDay] = []
    holiday_schedule: list[Holiday] = []


class SipServer(BaseModel):
    hostname: str | None = None
    sip_user_password: str | None = None


class Sip(BaseModel):
    status: str | None = None
    servers: list[SipServer] = []


class CallingSettings(BaseModel):
    status: str | None = None
    call_icon_visibility: str | None = None
    callback_permission_status: str | None = None
    call_hours: CallHours | None = None
    sip: Sip | None = None


class PhoneNumberSettings(BaseModel):
    phone_number_id: str | None = None
    calling: CallingSettings | None = Field(
        default = None,
        validation_alias = AliasChoices("calling", "callings"),
    )


class AccountSettingsUpdate(ChangeValue):
    """Payload of the `account_settings_update` field, sent when phone number settings (calling, SIP) change."""
    phone_number_settings: PhoneNumberSettings | None = None
