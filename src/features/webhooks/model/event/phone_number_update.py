from features.webhooks.model.change_value import ChangeValue


class PhoneNumberNameUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#phone_number_name_update"""
    display_phone_number: str | None = None
    decision: str | None = None
    requested_verified_name: str | None = None
    rejection_reason: str | None = None


class PhoneNumberQualityUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#phone_number_quality_update"""
    display_phone_number: str | None = None
    event: str | None = None
    current_limit: str | None = None
