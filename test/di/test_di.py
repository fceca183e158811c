import unittest
from unittest.mock import MagicMock

from api.webhook_controller import WebhookController
from di.di import DI, ConstructorDependencyNotMetError
from features.webhooks.error_policy import abort_on_error, continue_on_error
from features.webhooks.handler_registry import HandlerRegistry
from features.webhooks.model.notification import Notification
from features.webhooks.webhook_listener import WebhookListener, read_config
from features.webhooks.webhook_router import WebhookRouter


class DITest(unittest.TestCase):

    di: DI

    def setUp(self):
        self.di = DI()

    def test_defaults(self):
        self.assertIs(self.di.error_policy, continue_on_error)
        self.assertIs(self.di.config_reader, read_config)

    def test_constructor_dependencies(self):
        config_reader = MagicMock()

        di = DI(error_policy = abort_on_error, config_reader = config_reader)

        self.assertIs(di.error_policy, abort_on_error)
        self.assertIs(di.config_reader, config_reader)

    def test_dependencies_are_lazy_singletons(self):
        self.assertIsInstance(self.di.handler_registry, HandlerRegistry)
        self.assertIsInstance(self.di.webhook_router, WebhookRouter)
        self.assertIsInstance(self.di.webhook_listener, WebhookListener)
        self.assertIsInstance(self.di.webhook_controller, WebhookController)
        self.assertIs(self.di.handler_registry, self.di.handler_registry)
        self.assertIs(self.di.webhook_router, self.di.webhook_router)
        self.assertIs(self.di.webhook_listener, self.di.webhook_listener)
        self.assertIs(self.di.webhook_controller, self.di.webhook_controller)

    def test_injections_before_building(self):
        config_reader = MagicMock()

        self.di.inject_error_policy(abort_on_error)
        self.di.inject_config_reader(config_reader)

        self.assertIs(self.di.error_policy, abort_on_error)
        self.assertIs(self.di.config_reader, config_reader)

    def test_injections_after_building_fail(self):
        _ = self.di.webhook_listener

        with self.assertRaises(ConstructorDependencyNotMetError):
            self.di.inject_error_policy(abort_on_error)
        with self.assertRaises(ConstructorDependencyNotMetError):
            self.di.inject_config_reader(MagicMock())

    def test_registered_handlers_are_routed(self):
        handler = MagicMock()
        self.di.handler_registry.register(HandlerRegistry.Slot.account_review_update, handler)
        notification = Notification.model_validate(
            {
                "object": "whatsapp_business_account",
                "entry": [{"id": "1", "changes": [{"field": "account_review_update", "value": {"decision": "APPROVED"}}]}],
            },
        )

        result = self.di.webhook_router.dispatch(notification)

        self.assertEqual(result.status_code, 200)
        handler.assert_called_once()
