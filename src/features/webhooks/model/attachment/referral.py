from pydantic import BaseModel


class Referral(BaseModel):
    """Click-to-WhatsApp ad or post that led the user to send this message."""
    source_url: str | None = None
    source_type: str | None = None
    source_id: str | None = None
    headline: str | None = None
    body: str | None = None
    media_type: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    thumbnail_url: str | None = None
    ctwa_clid: str | None = None
