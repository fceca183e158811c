from pydantic import BaseModel


class MediaAttachment(BaseModel):
    """Shared payload of audio, video, image, document and sticker messages."""
    id: str | None = None
    caption: str | None = None
    mime_type: str | None = None
    sha256: str | None = None
    url: str | None = None
    filename: str | None = None  # documents only
    voice: bool | None = None  # audio only
    animated: bool | None = None  # stickers only
