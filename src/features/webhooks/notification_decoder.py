from pydantic import ValidationError as PydanticValidationError

from features.webhooks.model.notification import Notification
from util import log
from util.error_codes import MALFORMED_NOTIFICATION
from util.errors import InternalError


def decode_notification(body: bytes | str | None) -> Notification:
    """
    Decodes a raw webhook body into the typed notification tree.
    An empty body yields an empty notification; anything that is not valid JSON
    for the notification shape raises an `InternalError` (the request cannot be routed).
    """
    if body is None or not body.strip():
        log.t("Received an empty notification body")
        return Notification()
    try:
        return Notification.model_validate_json(body)
    except PydanticValidationError as e:
        raise InternalError(f"Malformed notification body ({e.error_count()} errors)", MALFORMED_NOTIFICATION) from e
