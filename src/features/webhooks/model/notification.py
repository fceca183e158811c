from pydantic import BaseModel, ConfigDict

from features.webhooks.model.entry import Entry


class Notification(BaseModel):
    """
    Root of one webhook delivery: { object: str, entry: [Entry] }.
    Extra fields are ignored to keep parsing resilient to platform additions.
    """

    model_config = ConfigDict(extra = "ignore")

    object: str = ""
    entry: list[Entry] = []
