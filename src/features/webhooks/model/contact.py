from pydantic import BaseModel


class Profile(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    name: str | None = None


class Contact(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    profile: Profile | None = None
    wa_id: str | None = None
