from typing import Any

from pydantic import BaseModel, ConfigDict

from features.webhooks.error_policy import ErrorPolicy, continue_on_error
from features.webhooks.handler_registry import HandlerRegistry
from features.webhooks.model.change import Change
from features.webhooks.model.change_field import ChangeField
from features.webhooks.model.entry import Entry
from features.webhooks.model.event.flow_event import (
    FlowClientErrorRate,
    FlowEndpointAvailability,
    FlowEndpointErrorRate,
    FlowEndpointLatency,
    FlowEvent,
    FlowStatusChange,
)
from features.webhooks.model.message import Message
from features.webhooks.model.message_type import InteractiveType, MessageType
from features.webhooks.model.messaging_value import MessagingValue
from features.webhooks.model.notification import Notification
from features.webhooks.notification_context import (
    BusinessNotificationContext,
    FlowNotificationContext,
    MessageInfo,
    MessageNotificationContext,
    ReferralNotification,
)
from util import log
from util.error_codes import MISSING_MESSAGE_PAYLOAD, UNRECOGNIZED_MESSAGE_TYPE
from util.errors import ValidationError

Slot = HandlerRegistry.Slot

BUSINESS_EVENT_SLOTS: dict[ChangeField, Slot] = {
    ChangeField.account_alerts: Slot.alert_notification,
    ChangeField.message_template_status_update: Slot.template_status_update,
    ChangeField.message_template_category_update: Slot.template_category_update,
    ChangeField.template_category_update: Slot.template_category_update,
    ChangeField.message_template_quality_update: Slot.template_quality_update,
    ChangeField.phone_number_name_update: Slot.phone_number_name_update,
    ChangeField.phone_number_quality_update: Slot.phone_number_quality_update,
    ChangeField.account_update: Slot.account_update,
    ChangeField.account_review_update: Slot.account_review_update,
    ChangeField.business_capability_update: Slot.capability_update,
}

FLOW_EVENT_SLOTS: dict[type[FlowEvent], Slot] = {
    FlowStatusChange: Slot.flow_status_change,
    FlowClientErrorRate: Slot.flow_client_error_rate,
    FlowEndpointErrorRate: Slot.flow_endpoint_error_rate,
    FlowEndpointLatency: Slot.flow_endpoint_latency,
    FlowEndpointAvailability: Slot.flow_endpoint_availability,
}

MEDIA_SLOTS: dict[MessageType, Slot] = {
    MessageType.audio: Slot.audio_message,
    MessageType.video: Slot.video_message,
    MessageType.image: Slot.image_message,
    MessageType.document: Slot.document_message,
    MessageType.sticker: Slot.sticker_message,
}


class _DispatchAborted(Exception):

    def __init__(self, reason: Exception):
        super().__init__(str(reason))
        self.reason = reason


class WebhookRouter:
    """
    Walks a decoded notification and invokes the registered handler for every item in it, in payload order.

    Each change is classified by its `field`. Messaging changes dispatch their notification errors first,
    then their statuses, then each message (classified by `type`, and interactive messages once more by
    their interactive `type`). Any failure is handed to the error policy: a `None` decision moves on to
    the next item, anything else aborts the remaining work and the result turns into a failure.
    """

    class Result(BaseModel):
        model_config = ConfigDict(arbitrary_types_allowed = True)

        status_code: int
        error: Exception | None = None

        @property
        def is_success(self) -> bool:
            return self.status_code < 400

    __registry: HandlerRegistry
    __error_policy: ErrorPolicy

    def __init__(self, registry: HandlerRegistry, error_policy: ErrorPolicy = continue_on_error):
        self.__registry = registry
        self.__error_policy = error_policy

    def swap_registry(self, registry: HandlerRegistry):
        # a single reference assignment, in-flight dispatches keep the registry they started with
        self.__registry = registry.copy()
        log.i(f"Swapped the handler registry, {len(registry.registered_slots())} slots are now registered")

    def dispatch(self, notification: Notification) -> Result:
        registry = self.__registry
        log.t(f"Dispatching a notification with {len(notification.entry)} entries")
        try:
            for entry in notification.entry:
                for change in entry.changes:
                    self.__route_change(registry, notification, entry, change)
        except _DispatchAborted as aborted:
            log.w(f"Notification processing aborted: {aborted.reason}")
            return WebhookRouter.Result(status_code = 500, error = aborted.reason)
        return WebhookRouter.Result(status_code = 200)

    # === Changes ===

    def __route_change(self, registry: HandlerRegistry, notification: Notification, entry: Entry, change: Change):
        change_field = change.change_field
        value = change.value
        match change_field:
            case None:
                log.d(f"Skipping a change with an unrecognized field '{change.field}'")
            case ChangeField.messages:
                self.__route_messaging(registry, entry, value)
            case ChangeField.user_preferences:
                context = MessageNotificationContext.of(entry, value)
                self.__invoke_batch(registry, Slot.user_preferences, context, value.user_preferences)
            case ChangeField.flows:
                self.__route_flow_event(registry, notification, entry, change)
            case ChangeField.account_settings_update:
                context = BusinessNotificationContext.of(notification, entry, change.field)
                self.__invoke(registry, Slot.phone_settings_update, context, value.phone_number_settings)
            case _:
                context = BusinessNotificationContext.of(notification, entry, change.field)
                self.__invoke(registry, BUSINESS_EVENT_SLOTS[change_field], context, value)

    def __route_flow_event(self, registry: HandlerRegistry, notification: Notification, entry: Entry, change: Change):
        event: FlowEvent = change.value
        slot = FLOW_EVENT_SLOTS.get(type(event))
        if slot is None:
            log.d(f"Skipping an unrecognized flow event '{event.event}'")
            return
        context = FlowNotificationContext(
            object = notification.object,
            entry_id = entry.id,
            entry_time = entry.time,
            change_field = change.field,
            event_name = event.event,
            event_message = event.message,
            flow_id = event.flow_id,
        )
        self.__invoke(registry, slot, context, event)

    def __route_messaging(self, registry: HandlerRegistry, entry: Entry, value: MessagingValue):
        context = MessageNotificationContext.of(entry, value)
        # order is a contract: errors, then statuses, then messages
        self.__invoke_batch(registry, Slot.notification_errors, context, value.errors)
        self.__invoke_batch(registry, Slot.status_changes, context, value.statuses)
        for message in value.messages:
            self.__route_message(registry, context, message)

    # === Messages ===

    def __route_message(self, registry: HandlerRegistry, context: MessageNotificationContext, message: Message):
        info = MessageInfo.of(message)
        message_type = message.message_type
        match message_type:
            case MessageType.order:
                self.__invoke_message(registry, Slot.order_message, context, info, message.order)
            case MessageType.button:
                self.__invoke_message(registry, Slot.button_message, context, info, message.button)
            case MessageType.system:
                self.__invoke_message(registry, Slot.system_message, context, info, message.system)
            case MessageType.reaction:
                self.__invoke_message(registry, Slot.reaction_message, context, info, message.reaction)
            case MessageType.location:
                self.__invoke_message(registry, Slot.location_message, context, info, message.location)
            case MessageType.contacts:
                self.__invoke_message(registry, Slot.contacts_message, context, info, message.contacts)
            case MessageType.audio | MessageType.video | MessageType.image | MessageType.document | MessageType.sticker:
                self.__invoke_message(registry, MEDIA_SLOTS[message_type], context, info, message.media(message_type))
            case MessageType.text:
                self.__route_text(registry, context, info, message)
            case MessageType.interactive:
                self.__route_interactive(registry, context, info, message)
            case MessageType.unknown:
                self.__invoke(registry, Slot.message_errors, context, info, message.errors)
            case MessageType.unsupported:
                self.__invoke(registry, Slot.unsupported_message, context, info, message.errors)
            case MessageType.request_welcome:
                self.__invoke(registry, Slot.request_welcome, context, info, message)
            case _:
                self.__route_by_payload(registry, context, info, message)

    def __route_text(self, registry: HandlerRegistry, context: MessageNotificationContext, info: MessageInfo, message: Message):
        if info.is_referral:
            referral = ReferralNotification(text = message.text, referral = message.referral)
            self.__invoke(registry, Slot.referral_message, context, info, referral)
        elif info.is_product_inquiry:
            self.__invoke_message(registry, Slot.product_inquiry, context, info, message.text)
        else:
            self.__invoke_message(registry, Slot.text_message, context, info, message.text)

    def __route_interactive(
        self,
        registry: HandlerRegistry,
        context: MessageNotificationContext,
        info: MessageInfo,
        message: Message,
    ):
        interactive = message.interactive
        if interactive is None:
            self.__invoke_message(registry, Slot.interactive_message, context, info, None)
            return
        match InteractiveType.lookup(interactive.type):
            case InteractiveType.list_reply:
                self.__invoke_message(registry, Slot.list_reply, context, info, interactive.list_reply)
            case InteractiveType.button_reply:
                self.__invoke_message(registry, Slot.button_reply, context, info, interactive.button_reply)
            case InteractiveType.nfm_reply:
                self.__invoke_message(registry, Slot.flow_completion, context, info, interactive.nfm_reply)
            case InteractiveType.address_message:
                self.__invoke_message(registry, Slot.address_submission, context, info, interactive.nfm_reply)
            case _:
                self.__invoke(registry, Slot.interactive_message, context, info, interactive)

    def __route_by_payload(
        self,
        registry: HandlerRegistry,
        context: MessageNotificationContext,
        info: MessageInfo,
        message: Message,
    ):
        # legacy payloads may omit the type: contacts > location > identity, in that order
        if message.contacts is not None:
            self.__invoke(registry, Slot.contacts_message, context, info, message.contacts)
        elif message.location is not None:
            self.__invoke(registry, Slot.location_message, context, info, message.location)
        elif message.identity is not None:
            self.__invoke(registry, Slot.customer_id_change, context, info, message.identity)
        else:
            error = ValidationError(f"Unrecognized message type '{message.type}' in message '{message.id}'", UNRECOGNIZED_MESSAGE_TYPE)
            self.__escalate(context, error)

    # === Invocation ===

    def __invoke_message(
        self,
        registry: HandlerRegistry,
        slot: Slot,
        context: MessageNotificationContext,
        info: MessageInfo,
        payload: Any,
    ):
        if payload is None:
            error = ValidationError(f"Message '{info.message_id}' of type '{info.type}' has no payload", MISSING_MESSAGE_PAYLOAD)
            self.__escalate(context, error)
            return
        self.__invoke(registry, slot, context, info, payload)

    def __invoke_batch(self, registry: HandlerRegistry, slot: Slot, context: MessageNotificationContext, items: list):
        if not items:
            return
        self.__invoke(registry, slot, context, items)

    def __invoke(self, registry: HandlerRegistry, slot: Slot, context: Any, *payload: Any):
        handler = registry.get(slot)
        if handler is None:
            return
        log.t(f"Invoking the '{slot.value}' handler")
        try:
            handler(context, *payload)
        except Exception as e:
            self.__escalate(context, e)

    def __escalate(self, context: Any, error: Exception):
        decision = self.__error_policy(context, error)
        if decision is not None:
            raise _DispatchAborted(decision) from error
