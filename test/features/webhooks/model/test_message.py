import unittest

from features.webhooks.model.message import Message
from features.webhooks.model.message_type import InteractiveType, MessageType


class MessageTypeTest(unittest.TestCase):

    def test_lookup_known(self):
        self.assertEqual(MessageType.lookup("text"), MessageType.text)
        self.assertEqual(MessageType.lookup(" Image "), MessageType.image)
        self.assertEqual(MessageType.lookup("request_welcome"), MessageType.request_welcome)

    def test_lookup_unknown(self):
        self.assertIsNone(MessageType.lookup("hologram"))
        self.assertIsNone(MessageType.lookup(None))

    def test_interactive_lookup(self):
        self.assertEqual(InteractiveType.lookup("nfm_reply"), InteractiveType.nfm_reply)
        self.assertIsNone(InteractiveType.lookup("carousel"))
        self.assertIsNone(InteractiveType.lookup(None))


class MessageTest(unittest.TestCase):

    def test_decodes_sender_alias(self):
        message = Message.model_validate({"from": "15551234567", "id": "wamid.1", "type": "text", "text": {"body": "Hi"}})

        self.assertEqual(message.from_, "15551234567")
        self.assertEqual(message.message_type, MessageType.text)
        self.assertEqual(message.text.body, "Hi")
        self.assertEqual(message.model_dump(by_alias = True, exclude_none = True)["from"], "15551234567")

    def test_missing_or_unknown_type(self):
        self.assertIsNone(Message().message_type)
        self.assertIsNone(Message(type = "hologram").message_type)

    def test_plain_message_flags(self):
        message = Message(id = "wamid.1", type = "text")

        self.assertFalse(message.is_a_reply)
        self.assertFalse(message.is_forwarded)
        self.assertFalse(message.is_product_inquiry)
        self.assertFalse(message.is_referral)

    def test_reply_flags(self):
        message = Message.model_validate({"type": "text", "context": {"from": "15550000000", "id": "wamid.0"}})

        self.assertTrue(message.is_a_reply)
        self.assertFalse(message.is_forwarded)
        self.assertEqual(message.context.from_, "15550000000")

    def test_forwarded_flags(self):
        message = Message.model_validate({"type": "text", "context": {"forwarded": True}})

        self.assertTrue(message.is_forwarded)
        self.assertFalse(message.is_a_reply)

    def test_product_inquiry_flags(self):
        message = Message.model_validate(
            {
                "type": "text",
                "context": {"referred_product": {"catalog_id": "c1", "product_retailer_id": "p1"}},
            },
        )

        self.assertTrue(message.is_product_inquiry)
        self.assertFalse(message.is_a_reply)
        self.assertEqual(message.context.referred_product.catalog_id, "c1")

    def test_referral_flag(self):
        message = Message.model_validate(
            {"type": "text", "referral": {"source_url": "https://ad.example.com", "source_type": "ad"}},
        )

        self.assertTrue(message.is_referral)

    def test_media_selects_the_attachment_of_the_type(self):
        message = Message.model_validate(
            {
                "type": "document",
                "document": {"id": "doc1", "filename": "invoice.pdf", "mime_type": "application/pdf"},
                "image": {"id": "img1"},
            },
        )

        self.assertEqual(message.media(MessageType.document).filename, "invoice.pdf")
        self.assertEqual(message.media(MessageType.image).id, "img1")
        self.assertIsNone(message.media(MessageType.audio))
        self.assertIsNone(message.media(MessageType.text))

    def test_extra_keys_are_ignored(self):
        message = Message.model_validate({"id": "wamid.1", "type": "text", "brand_new_key": {"x": 1}})

        self.assertEqual(message.id, "wamid.1")
        self.assertNotIn("brand_new_key", message.model_dump())

    def test_contacts_payload(self):
        message = Message.model_validate(
            {
                "type": "contacts",
                "contacts": [
                    {
                        "name": {"formatted_name": "Jane Doe", "first_name": "Jane"},
                        "phones": [{"phone": "+1 555 000", "type": "CELL", "wa_id": "1555000"}],
                    },
                ],
            },
        )

        self.assertEqual(len(message.contacts), 1)
        self.assertEqual(message.contacts[0].name.formatted_name, "Jane Doe")
        self.assertEqual(message.contacts[0].phones[0].wa_id, "1555000")
