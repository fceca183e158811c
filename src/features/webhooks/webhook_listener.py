from typing import Callable

from pydantic import BaseModel, SecretStr

from features.webhooks.model.notification import Notification
from features.webhooks.notification_decoder import decode_notification
from features.webhooks.signature_verifier import verify_signature
from features.webhooks.subscription_verifier import verify_subscription
from features.webhooks.webhook_router import WebhookRouter
from util import log
from util.config import config


class WebhookConfig(BaseModel):
    verify_token: SecretStr
    app_secret: SecretStr
    validate_signature: bool
    log_notifications: bool = False


ConfigReader = Callable[[], WebhookConfig]
NotificationHandler = Callable[[Notification], WebhookRouter.Result]
Middleware = Callable[[NotificationHandler], NotificationHandler]


def read_config() -> WebhookConfig:
    return WebhookConfig(
        verify_token = config.whatsapp_verify_token,
        app_secret = config.whatsapp_app_secret,
        validate_signature = config.whatsapp_must_auth,
        log_notifications = config.log_whatsapp_update,
    )


class WebhookListener:
    """
    Runs the inbound pipeline: verify the signature (when enabled), decode the body,
    then hand the notification to the router wrapped in the configured middlewares.
    The first middleware in the list is the outermost one.
    """

    __router: WebhookRouter
    __config_reader: ConfigReader
    __middlewares: list[Middleware]

    def __init__(
        self,
        router: WebhookRouter,
        config_reader: ConfigReader = read_config,
        middlewares: list[Middleware] | None = None,
    ):
        self.__router = router
        self.__config_reader = config_reader
        self.__middlewares = list(middlewares or [])

    def use(self, middleware: Middleware) -> Middleware:
        self.__middlewares.append(middleware)
        return middleware

    def verify_subscription(self, mode: str | None, challenge: str | None, token: str | None) -> str:
        webhook_config = self.__config_reader()
        log.d(f"Verifying a webhook subscription request, mode '{mode}'")
        return verify_subscription(mode, challenge, token, webhook_config.verify_token.get_secret_value())

    def handle_notification(self, body: bytes, signature: str | None) -> WebhookRouter.Result:
        webhook_config = self.__config_reader()
        if webhook_config.validate_signature:
            verify_signature(body, signature, webhook_config.app_secret.get_secret_value())
        notification = decode_notification(body)
        if webhook_config.log_notifications:
            log.t("Received a WhatsApp notification", notification)
        return self.__build_handler()(notification)

    def __build_handler(self) -> NotificationHandler:
        handler: NotificationHandler = self.__router.dispatch
        for middleware in reversed(self.__middlewares):
            handler = middleware(handler)
        return handler
