from pydantic import BaseModel

from features.webhooks.model.change_value import ChangeValue


class RestrictionInfo(BaseModel):
    restriction_type: str | None = None  # e.g. RESTRICTED_BIZ_INITIATED_MESSAGING
    expiration: str | None = None


class BanInfo(BaseModel):
    waba_ban_state: str | None = None  # DISABLE, REINSTATE, SCHEDULE_FOR_DISABLE
    waba_ban_date: str | None = None
    current_limit: str | None = None


class ViolationInfo(BaseModel):
    violation_type: str | None = None


class AccountUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#account_update"""
    phone_number: str | None = None
    event: str | None = None
    restriction_info: list[RestrictionInfo] = []
    ban_info: BanInfo | None = None
    violation_info: ViolationInfo | None = None


class AccountReviewUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#account_review_update"""
    decision: str | None = None


class CapabilityUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#business_capability_update"""
    max_daily_conversation_per_phone: int | None = None
    max_phone_numbers_per_business: int | None = None
    max_phone_numbers_per_waba: int | None = None
