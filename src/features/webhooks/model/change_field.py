from enum import Enum


class ChangeField(Enum):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account"""

    messages = "messages"
    user_preferences = "user_preferences"
    account_alerts = "account_alerts"
    message_template_status_update = "message_template_status_update"
    message_template_category_update = "message_template_category_update"
    template_category_update = "template_category_update"  # older name of the category update
    message_template_quality_update = "message_template_quality_update"
    phone_number_name_update = "phone_number_name_update"
    phone_number_quality_update = "phone_number_quality_update"
    account_update = "account_update"
    account_review_update = "account_review_update"
    business_capability_update = "business_capability_update"
    account_settings_update = "account_settings_update"
    flows = "flows"

    @classmethod
    def lookup(cls, value: str | None) -> "ChangeField | None":
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None
