from pydantic import BaseModel, ConfigDict


class ChangeValue(BaseModel):
    """Base of every payload variant a Change can carry, chosen by the change field."""

    model_config = ConfigDict(extra = "ignore", populate_by_name = True)


class UnknownValue(ChangeValue):
    """Payload of a change field this service does not route. Raw keys are kept."""

    model_config = ConfigDict(extra = "allow")
