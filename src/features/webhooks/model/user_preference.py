from pydantic import BaseModel


class UserPreference(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/user_preferences"""
    wa_id: str | None = None
    detail: str | None = None
    category: str | None = None  # always "marketing_messages" for now
    value: str | None = None  # "stop" or "resume"
    timestamp: str | None = None
