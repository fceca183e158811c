from enum import Enum
from typing import Any, Callable

from util import log

Handler = Callable[..., Any]


class HandlerRegistry:
    """
    One callback slot per routable event kind. Empty slots hold `None` and are skipped during dispatch.

    Handler signatures by slot group:
     - business events: fn(BusinessNotificationContext, details)
     - flow events: fn(FlowNotificationContext, details)
     - messages: fn(MessageNotificationContext, MessageInfo, payload)
     - batches: fn(MessageNotificationContext, items)

    Handlers signal failure by raising; the router hands the exception to the error policy.
    Register everything during setup. Once requests are served, replace the registry as a whole
    through `WebhookRouter.swap_registry` instead of mutating it.
    """

    class Slot(Enum):
        # business events
        alert_notification = "alert_notification"
        template_status_update = "template_status_update"
        template_category_update = "template_category_update"
        template_quality_update = "template_quality_update"
        phone_number_name_update = "phone_number_name_update"
        phone_number_quality_update = "phone_number_quality_update"
        account_update = "account_update"
        account_review_update = "account_review_update"
        capability_update = "capability_update"
        phone_settings_update = "phone_settings_update"
        # flow events
        flow_status_change = "flow_status_change"
        flow_client_error_rate = "flow_client_error_rate"
        flow_endpoint_error_rate = "flow_endpoint_error_rate"
        flow_endpoint_latency = "flow_endpoint_latency"
        flow_endpoint_availability = "flow_endpoint_availability"
        # messages
        text_message = "text_message"
        product_inquiry = "product_inquiry"
        referral_message = "referral_message"
        button_message = "button_message"
        order_message = "order_message"
        location_message = "location_message"
        contacts_message = "contacts_message"
        reaction_message = "reaction_message"
        system_message = "system_message"
        customer_id_change = "customer_id_change"
        request_welcome = "request_welcome"
        audio_message = "audio_message"
        video_message = "video_message"
        image_message = "image_message"
        document_message = "document_message"
        sticker_message = "sticker_message"
        interactive_message = "interactive_message"
        button_reply = "button_reply"
        list_reply = "list_reply"
        flow_completion = "flow_completion"
        address_submission = "address_submission"
        message_errors = "message_errors"
        unsupported_message = "unsupported_message"
        # batches
        notification_errors = "notification_errors"
        status_changes = "status_changes"
        user_preferences = "user_preferences"

    __handlers: dict[Slot, Handler | None]

    def __init__(self, handlers: dict[Slot, Handler | None] | None = None):
        self.__handlers = {slot: None for slot in HandlerRegistry.Slot}
        if handlers:
            self.__handlers.update(handlers)

    def register(self, slot: Slot, handler: Handler | None) -> Handler | None:
        log.t(f"Registering a handler for '{slot.value}'")
        self.__handlers[slot] = handler
        return handler

    def on(self, slot: Slot) -> Callable[[Handler], Handler]:
        """Decorator form of `register`, the decorated function is returned unchanged."""

        def decorator(handler: Handler) -> Handler:
            self.register(slot, handler)
            return handler

        return decorator

    def get(self, slot: Slot) -> Handler | None:
        return self.__handlers[slot]

    def registered_slots(self) -> list[Slot]:
        return [slot for slot, handler in self.__handlers.items() if handler is not None]

    def copy(self) -> "HandlerRegistry":
        return HandlerRegistry(dict(self.__handlers))
