from pydantic import BaseModel


class Metadata(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    display_phone_number: str | None = None
    phone_number_id: str | None = None
