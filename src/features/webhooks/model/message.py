from pydantic import BaseModel, ConfigDict, Field

from features.webhooks.model.attachment.button import Button
from features.webhooks.model.attachment.contacts import ContactCard
from features.webhooks.model.attachment.identity import Identity
from features.webhooks.model.attachment.interactive import Interactive
from features.webhooks.model.attachment.location import Location
from features.webhooks.model.attachment.media_attachment import MediaAttachment
from features.webhooks.model.attachment.order import Order
from features.webhooks.model.attachment.reaction import Reaction
from features.webhooks.model.attachment.referral import Referral
from features.webhooks.model.attachment.system import System
from features.webhooks.model.attachment.text import Text
from features.webhooks.model.context import Context
from features.webhooks.model.error_info import ErrorInfo
from features.webhooks.model.message_type import MessageType


class Message(BaseModel):
    """
    https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#message-object

    The `type` is kept as a raw string: payloads may omit it or carry types newer than this service,
    and the router then infers the kind from the populated payload instead.
    """

    model_config = ConfigDict(extra = "ignore", populate_by_name = True)

    from_: str | None = Field(default = None, alias = "from")
    id: str | None = None
    timestamp: str | None = None
    type: str | None = None
    context: Context | None = None
    errors: list[ErrorInfo] = []
    text: Text | None = None
    image: MediaAttachment | None = None
    audio: MediaAttachment | None = None
    video: MediaAttachment | None = None
    document: MediaAttachment | None = None
    sticker: MediaAttachment | None = None
    location: Location | None = None
    contacts: list[ContactCard] | None = None
    reaction: Reaction | None = None
    button: Button | None = None
    order: Order | None = None
    system: System | None = None
    interactive: Interactive | None = None
    referral: Referral | None = None
    identity: Identity | None = None

    @property
    def message_type(self) -> MessageType | None:
        return MessageType.lookup(self.type)

    @property
    def is_a_reply(self) -> bool:
        return self.context is not None and self.context.referred_product is None and not self.context.forwarded

    @property
    def is_forwarded(self) -> bool:
        return self.context is not None and self.context.forwarded

    @property
    def is_product_inquiry(self) -> bool:
        return self.context is not None and self.context.referred_product is not None

    @property
    def is_referral(self) -> bool:
        return self.referral is not None

    def media(self, message_type: MessageType) -> MediaAttachment | None:
        match message_type:
            case MessageType.audio:
                return self.audio
            case MessageType.video:
                return self.video
            case MessageType.image:
                return self.image
            case MessageType.document:
                return self.document
            case MessageType.sticker:
                return self.sticker
        return None
