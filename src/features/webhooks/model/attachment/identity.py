from pydantic import BaseModel


class Identity(BaseModel):
    """Sent when the customer's identity key changed (e.g. a re-installed app)."""
    acknowledged: bool | None = None
    created_timestamp: int | None = None
    hash: str | None = None
