from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.webhook_controller import WebhookController
    from features.webhooks.error_policy import ErrorPolicy
    from features.webhooks.handler_registry import HandlerRegistry
    from features.webhooks.webhook_listener import ConfigReader, WebhookListener
    from features.webhooks.webhook_router import WebhookRouter


class ConstructorDependencyNotMetError(Exception):
    pass


class DI:

    # Dynamic dependencies
    _error_policy: "ErrorPolicy | None"
    _config_reader: "ConfigReader | None"
    # Webhooks
    _handler_registry: "HandlerRegistry | None"
    _webhook_router: "WebhookRouter | None"
    _webhook_listener: "WebhookListener | None"
    # Controllers
    _webhook_controller: "WebhookController | None"

    def __init__(
        self,
        error_policy: "ErrorPolicy | None" = None,
        config_reader: "ConfigReader | None" = None,
    ):
        # Dynamic dependencies
        self._error_policy = error_policy
        self._config_reader = config_reader
        # Webhooks
        self._handler_registry = None
        self._webhook_router = None
        self._webhook_listener = None
        # Controllers
        self._webhook_controller = None

    # === Dynamic dependencies ===

    @property
    def error_policy(self) -> "ErrorPolicy":
        if self._error_policy is None:
            from features.webhooks.error_policy import continue_on_error
            self._error_policy = continue_on_error
        return self._error_policy

    @property
    def config_reader(self) -> "ConfigReader":
        if self._config_reader is None:
            from features.webhooks.webhook_listener import read_config
            self._config_reader = read_config
        return self._config_reader

    # === Dynamic injections ===

    def inject_error_policy(self, error_policy: "ErrorPolicy"):
        if self._webhook_router is not None:
            raise ConstructorDependencyNotMetError("Error policy must be injected before the router is built")
        self._error_policy = error_policy

    def inject_config_reader(self, config_reader: "ConfigReader"):
        if self._webhook_listener is not None:
            raise ConstructorDependencyNotMetError("Config reader must be injected before the listener is built")
        self._config_reader = config_reader

    # === Webhooks ===

    @property
    def handler_registry(self) -> "HandlerRegistry":
        if self._handler_registry is None:
            from features.webhooks.handler_registry import HandlerRegistry
            self._handler_registry = HandlerRegistry()
        return self._handler_registry

    @property
    def webhook_router(self) -> "WebhookRouter":
        if self._webhook_router is None:
            from features.webhooks.webhook_router import WebhookRouter
            self._webhook_router = WebhookRouter(self.handler_registry, self.error_policy)
        return self._webhook_router

    @property
    def webhook_listener(self) -> "WebhookListener":
        if self._webhook_listener is None:
            from features.webhooks.webhook_listener import WebhookListener
            self._webhook_listener = WebhookListener(self.webhook_router, self.config_reader)
        return self._webhook_listener

    # === Controllers ===

    @property
    def webhook_controller(self) -> "WebhookController":
        if self._webhook_controller is None:
            from api.webhook_controller import WebhookController
            self._webhook_controller = WebhookController(self.webhook_listener)
        return self._webhook_controller
