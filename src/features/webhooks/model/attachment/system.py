from pydantic import BaseModel


class System(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#system-messages"""
    body: str | None = None
    type: str | None = None
    identity: str | None = None
    new_wa_id: str | None = None
    wa_id: str | None = None
    customer: str | None = None
