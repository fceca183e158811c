import unittest
from unittest.mock import MagicMock

from features.webhooks.handler_registry import HandlerRegistry

Slot = HandlerRegistry.Slot


class HandlerRegistryTest(unittest.TestCase):

    def test_new_registry_is_empty(self):
        registry = HandlerRegistry()

        self.assertEqual(registry.registered_slots(), [])
        for slot in Slot:
            self.assertIsNone(registry.get(slot))

    def test_register_returns_the_handler(self):
        registry = HandlerRegistry()
        handler = MagicMock()

        result = registry.register(Slot.text_message, handler)

        self.assertIs(result, handler)
        self.assertIs(registry.get(Slot.text_message), handler)
        self.assertEqual(registry.registered_slots(), [Slot.text_message])

    def test_register_replaces_and_clears(self):
        registry = HandlerRegistry()
        first = MagicMock()
        second = MagicMock()

        registry.register(Slot.status_changes, first)
        registry.register(Slot.status_changes, second)
        self.assertIs(registry.get(Slot.status_changes), second)

        registry.register(Slot.status_changes, None)
        self.assertIsNone(registry.get(Slot.status_changes))
        self.assertEqual(registry.registered_slots(), [])

    def test_decorator_registers_and_keeps_the_function(self):
        registry = HandlerRegistry()

        @registry.on(Slot.reaction_message)
        def on_reaction(context, info, reaction):
            return reaction

        self.assertIs(registry.get(Slot.reaction_message), on_reaction)
        self.assertEqual(on_reaction(None, None, "👍"), "👍")

    def test_constructor_accepts_handlers(self):
        handler = MagicMock()

        registry = HandlerRegistry({Slot.flow_status_change: handler})

        self.assertIs(registry.get(Slot.flow_status_change), handler)
        self.assertIsNone(registry.get(Slot.flow_endpoint_latency))

    def test_copy_is_independent(self):
        registry = HandlerRegistry()
        registry.register(Slot.order_message, MagicMock())

        copied = registry.copy()
        registry.register(Slot.order_message, None)
        copied.register(Slot.image_message, MagicMock())

        self.assertEqual(copied.registered_slots(), [Slot.order_message, Slot.image_message])
        self.assertEqual(registry.registered_slots(), [])

    def test_slot_values_are_unique(self):
        values = [slot.value for slot in Slot]

        self.assertEqual(len(values), len(set(values)))
        self.assertEqual(len(values), 41)
