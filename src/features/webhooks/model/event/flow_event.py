from enum import Enum

from features.webhooks.model.change_value import ChangeValue
from features.webhooks.model.error_info import ErrorInfo


class FlowEventName(Enum):
    """https://developers.facebook.com/docs/whatsapp/flows/reference/flowswebhooks"""

    status_change = "FLOW_STATUS_CHANGE"
    client_error_rate = "CLIENT_ERROR_RATE"
    endpoint_error_rate = "ENDPOINT_ERROR_RATE"
    endpoint_latency = "ENDPOINT_LATENCY"
    endpoint_availability = "ENDPOINT_AVAILABILITY"

    @classmethod
    def lookup(cls, value: str | None) -> "FlowEventName | None":
        if value is None:
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class FlowEvent(ChangeValue):
    """Fields shared by every flow event. The `event` name selects the concrete variant."""
    event: str | None = None
    message: str | None = None
    flow_id: str | None = None


class FlowStatusChange(FlowEvent):
    old_status: str | None = None
    new_status: str | None = None


class FlowClientErrorRate(FlowEvent):
    error_rate: float | None = None
    threshold: int | None = None
    alert_state: str | None = None  # ACTIVATED or DEACTIVATED
    errors: list[ErrorInfo] = []


class FlowEndpointErrorRate(FlowEvent):
    error_rate: float | None = None
    threshold: int | None = None
    alert_state: str | None = None
    errors: list[ErrorInfo] = []


class FlowEndpointLatency(FlowEvent):
    p50_latency: int | None = None
    p90_latency: int | None = None
    requests_count: int | None = None
    threshold: int | None = None
    alert_state: str | None = None


class FlowEndpointAvailability(FlowEvent):
    availability: int | None = None
    threshold: int | None = None
    alert_state: str | None = None


class UnknownFlowEvent(FlowEvent):
    pass


FLOW_EVENT_TYPES: dict[FlowEventName, type[FlowEvent]] = {
    FlowEventName.status_change: FlowStatusChange,
    FlowEventName.client_error_rate: FlowClientErrorRate,
    FlowEventName.endpoint_error_rate: FlowEndpointErrorRate,
    FlowEventName.endpoint_latency: FlowEndpointLatency,
    FlowEventName.endpoint_availability: FlowEndpointAvailability,
}
