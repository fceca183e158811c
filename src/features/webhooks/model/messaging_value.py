from features.webhooks.model.change_value import ChangeValue
from features.webhooks.model.contact import Contact
from features.webhooks.model.error_info import ErrorInfo
from features.webhooks.model.message import Message
from features.webhooks.model.metadata import Metadata
from features.webhooks.model.status import Status
from features.webhooks.model.user_preference import UserPreference


class MessagingValue(ChangeValue):
    """
    Payload of the `messages` and `user_preferences` fields.
    https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#value-object
    """
    messaging_product: str | None = None
    metadata: Metadata | None = None
    contacts: list[Contact] = []
    messages: list[Message] = []
    statuses: list[Status] = []
    errors: list[ErrorInfo] = []
    user_preferences: list[UserPreference] = []
