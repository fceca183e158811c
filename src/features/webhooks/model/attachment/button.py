from pydantic import BaseModel


class Button(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#button-messages"""
    payload: str | None = None
    text: str | None = None
