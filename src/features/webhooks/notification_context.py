from pydantic import BaseModel, ConfigDict, Field

from features.webhooks.model.attachment.referral import Referral
from features.webhooks.model.attachment.text import Text
from features.webhooks.model.contact import Contact
from features.webhooks.model.context import Context
from features.webhooks.model.entry import Entry
from features.webhooks.model.message import Message
from features.webhooks.model.messaging_value import MessagingValue
from features.webhooks.model.metadata import Metadata
from features.webhooks.model.notification import Notification


class BusinessNotificationContext(BaseModel):
    """Where a business-account event came from: the notification object, its entry and the change field."""
    object: str
    entry_id: str
    entry_time: int | None = None
    change_field: str

    @staticmethod
    def of(notification: Notification, entry: Entry, change_field: str) -> "BusinessNotificationContext":
        return BusinessNotificationContext(
            object = notification.object,
            entry_id = entry.id,
            entry_time = entry.time,
            change_field = change_field,
        )


class FlowNotificationContext(BusinessNotificationContext):
    event_name: str | None = None
    event_message: str | None = None
    flow_id: str | None = None


class SenderInfo(BaseModel):
    name: str | None = None
    wa_id: str | None = None


class MessageNotificationContext(BaseModel):
    """Shared by every message, status, error and preference handler of one change."""
    entry_id: str
    messaging_product: str | None = None
    contacts: list[Contact] = []
    metadata: Metadata | None = None

    @staticmethod
    def of(entry: Entry, value: MessagingValue) -> "MessageNotificationContext":
        return MessageNotificationContext(
            entry_id = entry.id,
            messaging_product = value.messaging_product,
            contacts = value.contacts,
            metadata = value.metadata,
        )

    def sender_info(self) -> SenderInfo | None:
        senders = self.all_senders()
        return senders[0] if senders else None

    def all_senders(self) -> list[SenderInfo]:
        return [
            SenderInfo(name = contact.profile.name if contact.profile else None, wa_id = contact.wa_id)
            for contact in self.contacts
        ]


class MessageInfo(BaseModel):
    """Message attributes common to all message types, handed to every message handler."""

    model_config = ConfigDict(populate_by_name = True)

    from_: str | None = Field(default = None, alias = "from")
    message_id: str | None = None
    timestamp: str | None = None
    type: str | None = None
    context: Context | None = None
    is_a_reply: bool = False
    is_forwarded: bool = False
    is_product_inquiry: bool = False
    is_referral: bool = False

    @staticmethod
    def of(message: Message) -> "MessageInfo":
        return MessageInfo(
            from_ = message.from_,
            message_id = message.id,
            timestamp = message.timestamp,
            type = message.type,
            context = message.context,
            is_a_reply = message.is_a_reply,
            is_forwarded = message.is_forwarded,
            is_product_inquiry = message.is_product_inquiry,
            is_referral = message.is_referral,
        )


class ReferralNotification(BaseModel):
    text: Text | None = None
    referral: Referral | None = None
