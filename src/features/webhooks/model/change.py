from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, ValidationInfo, field_validator

from features.webhooks.model.change_field import ChangeField
from features.webhooks.model.change_value import ChangeValue, UnknownValue
from features.webhooks.model.event.account_settings_update import AccountSettingsUpdate
from features.webhooks.model.event.account_update import AccountReviewUpdate, AccountUpdate, CapabilityUpdate
from features.webhooks.model.event.alert_notification import AlertNotification
from features.webhooks.model.event.flow_event import FLOW_EVENT_TYPES, FlowEventName, UnknownFlowEvent
from features.webhooks.model.event.phone_number_update import PhoneNumberNameUpdate, PhoneNumberQualityUpdate
from features.webhooks.model.event.template_update import (
    TemplateCategoryUpdate,
    TemplateQualityUpdate,
    TemplateStatusUpdate,
)
from features.webhooks.model.messaging_value import MessagingValue

VALUE_TYPES: dict[ChangeField, type[ChangeValue]] = {
    ChangeField.messages: MessagingValue,
    ChangeField.user_preferences: MessagingValue,
    ChangeField.account_alerts: AlertNotification,
    ChangeField.message_template_status_update: TemplateStatusUpdate,
    ChangeField.message_template_category_update: TemplateCategoryUpdate,
    ChangeField.template_category_update: TemplateCategoryUpdate,
    ChangeField.message_template_quality_update: TemplateQualityUpdate,
    ChangeField.phone_number_name_update: PhoneNumberNameUpdate,
    ChangeField.phone_number_quality_update: PhoneNumberQualityUpdate,
    ChangeField.account_update: AccountUpdate,
    ChangeField.account_review_update: AccountReviewUpdate,
    ChangeField.business_capability_update: CapabilityUpdate,
    ChangeField.account_settings_update: AccountSettingsUpdate,
}


def resolve_value_type(field: str | None, raw_value: Any) -> type[ChangeValue]:
    change_field = ChangeField.lookup(field)
    if change_field is None:
        return UnknownValue
    if change_field == ChangeField.flows:
        event = raw_value.get("event") if isinstance(raw_value, dict) else None
        flow_event_name = FlowEventName.lookup(event)
        if flow_event_name is None:
            return UnknownFlowEvent
        return FLOW_EVENT_TYPES[flow_event_name]
    return VALUE_TYPES[change_field]


class Change(BaseModel):
    """
    A single typed event within an Entry.
    https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account

    Decoding happens in two steps: `field` is read first, and only then is `value` validated
    against the one payload variant registered for that field (flow events are narrowed a second
    time by their `event` name). Unrecognized fields keep their raw keys in an `UnknownValue`.
    """

    model_config = ConfigDict(extra = "ignore")

    # the field must stay declared before the value, validation reads it from there
    field: str | None = None
    value: SerializeAsAny[ChangeValue] = Field(default_factory = UnknownValue)

    @field_validator("value", mode = "before")
    @classmethod
    def decode_value(cls, raw_value: Any, info: ValidationInfo) -> Any:
        if isinstance(raw_value, ChangeValue):
            return raw_value
        value_type = resolve_value_type(info.data.get("field"), raw_value)
        return value_type.model_validate(raw_value if raw_value is not None else {})

    @property
    def change_field(self) -> ChangeField | None:
        return ChangeField.lookup(self.field)
