from enum import Enum


class MessageType(Enum):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#message-object"""

    audio = "audio"
    button = "button"
    document = "document"
    text = "text"
    image = "image"
    interactive = "interactive"
    order = "order"
    sticker = "sticker"
    system = "system"
    unknown = "unknown"
    unsupported = "unsupported"
    video = "video"
    location = "location"
    reaction = "reaction"
    contacts = "contacts"
    request_welcome = "request_welcome"

    @classmethod
    def lookup(cls, value: str | None) -> "MessageType | None":
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class InteractiveType(Enum):
    list_reply = "list_reply"
    button_reply = "button_reply"
    nfm_reply = "nfm_reply"
    address_message = "address_message"

    @classmethod
    def lookup(cls, value: str | None) -> "InteractiveType | None":
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None
