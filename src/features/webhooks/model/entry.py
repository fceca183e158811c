from pydantic import BaseModel, ConfigDict

from features.webhooks.model.change import Change


class Entry(BaseModel):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account"""

    model_config = ConfigDict(extra = "ignore")

    id: str = ""
    time: int | None = None
    changes: list[Change] = []
