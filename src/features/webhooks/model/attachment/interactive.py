from pydantic import BaseModel


class ListReply(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    id: str | None = None
    title: str | None = None
    description: str | None = None


class ButtonReply(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    id: str | None = None
    title: str | None = None


class NfmReply(BaseModel):
    """Flow completion or address submission. `response_json` is the flow's output, serialized as a JSON string."""
    name: str | None = None
    body: str | None = None
    response_json: str | None = None


class Interactive(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#interactive-messages"""
    type: str | None = None
    list_reply: ListReply | None = None
    button_reply: ButtonReply | None = None
    nfm_reply: NfmReply | None = None
