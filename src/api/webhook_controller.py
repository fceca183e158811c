from fastapi.security import APIKeyHeader
from starlette.responses import JSONResponse, PlainTextResponse, Response

from features.webhooks.signature_verifier import SIGNATURE_HEADER
from features.webhooks.webhook_listener import WebhookListener
from util import log
from util.errors import AuthorizationError, ServiceError

whatsapp_signature_header = APIKeyHeader(name = SIGNATURE_HEADER, auto_error = False)


class WebhookController:

    __listener: WebhookListener

    def __init__(self, listener: WebhookListener):
        self.__listener = listener

    def verify_subscription(self, mode: str | None, challenge: str | None, verify_token: str | None) -> Response:
        try:
            challenge = self.__listener.verify_subscription(mode, challenge, verify_token)
        except AuthorizationError as e:
            log.w("Rejected a webhook subscription request", e)
            return Response(status_code = e.http_status)
        log.i("Webhook subscription verified")
        return PlainTextResponse(challenge)

    def receive_notification(self, body: bytes, signature: str | None) -> Response:
        try:
            result = self.__listener.handle_notification(body, signature)
        except ServiceError as e:
            if e.http_status < 500:
                log.w("Rejected a webhook notification", e)
            else:
                log.e("Failed to process a webhook notification", e)
            return JSONResponse(status_code = e.http_status, content = e.to_api_dict())
        return Response(status_code = result.status_code)
