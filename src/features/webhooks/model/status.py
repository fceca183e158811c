from pydantic import BaseModel

from features.webhooks.model.error_info import ErrorInfo


class ConversationOrigin(BaseModel):
    type: str | None = None


class Conversation(BaseModel):
    id: str | None = None
    origin: ConversationOrigin | None = None
    expiration_timestamp: str | None = None


class Pricing(BaseModel):
    billable: bool | None = None  # deprecated by the platform
    category: str | None = None
    pricing_model: str | None = None


class Status(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#statuses-object"""
    id: str | None = None
    recipient_id: str | None = None
    status: str | None = None  # sent, delivered, read, failed, deleted, warning
    timestamp: str | None = None
    conversation: Conversation | None = None
    pricing: Pricing | None = None
    errors: list[ErrorInfo] = []
    biz_opaque_callback_data: str | None = None
