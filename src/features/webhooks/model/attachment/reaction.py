from pydantic import BaseModel


class Reaction(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#reaction-messages"""
    message_id: str | None = None
    emoji: str | None = None  # absent when the reaction is removed
