import hashlib
import hmac
import unittest

from features.webhooks.signature_verifier import SIGNATURE_PREFIX, compute_signature, verify_signature
from util.error_codes import INVALID_SIGNATURE, MALFORMED_SIGNATURE, MISSING_APP_SECRET, MISSING_SIGNATURE
from util.errors import BadRequestError, ConfigurationError


class SignatureVerifierTest(unittest.TestCase):

    body: bytes
    app_secret: str

    def setUp(self):
        self.body = b'{"object":"whatsapp_business_account","entry":[]}'
        self.app_secret = "test_app_secret"

    def test_compute_signature(self):
        expected = hmac.new(self.app_secret.encode("utf-8"), self.body, hashlib.sha256).hexdigest()

        signature = compute_signature(self.body, self.app_secret)

        self.assertEqual(signature, f"sha256={expected}")
        self.assertTrue(signature.startswith(SIGNATURE_PREFIX))

    def test_valid_signature(self):
        signature = compute_signature(self.body, self.app_secret)

        self.assertIsNone(verify_signature(self.body, signature, self.app_secret))

    def test_uppercase_hex_digest_is_accepted(self):
        digest = compute_signature(self.body, self.app_secret)[len(SIGNATURE_PREFIX):]

        verify_signature(self.body, f"{SIGNATURE_PREFIX}{digest.upper()}", self.app_secret)

    def test_modified_body_is_rejected(self):
        signature = compute_signature(self.body, self.app_secret)
        tampered_body = self.body.replace(b"[]", b"[ ]")

        with self.assertRaises(BadRequestError) as context:
            verify_signature(tampered_body, signature, self.app_secret)

        self.assertEqual(context.exception.error_code, INVALID_SIGNATURE)
        self.assertEqual(context.exception.message, "Invalid signature")
        self.assertEqual(context.exception.http_status, 400)

    def test_single_bit_flips_are_rejected(self):
        signature = compute_signature(self.body, self.app_secret)
        secret_bytes = self.app_secret.encode("utf-8")

        for position in [0, 1, len(self.body) // 2, len(self.body) - 1]:
            flipped_body = self.body[:position] + bytes([self.body[position] ^ 1]) + self.body[position + 1:]
            with self.assertRaises(BadRequestError) as context:
                verify_signature(flipped_body, signature, self.app_secret)
            self.assertEqual(context.exception.error_code, INVALID_SIGNATURE)

        for position in [0, len(secret_bytes) // 2, len(secret_bytes) - 1]:
            flipped_secret = secret_bytes[:position] + bytes([secret_bytes[position] ^ 1]) + secret_bytes[position + 1:]
            with self.assertRaises(BadRequestError) as context:
                verify_signature(self.body, signature, flipped_secret.decode("utf-8"))
            self.assertEqual(context.exception.error_code, INVALID_SIGNATURE)

    def test_different_secret_is_rejected(self):
        signature = compute_signature(self.body, "another_secret")

        with self.assertRaises(BadRequestError) as context:
            verify_signature(self.body, signature, self.app_secret)

        self.assertEqual(context.exception.error_code, INVALID_SIGNATURE)

    def test_missing_signature_is_rejected(self):
        for signature in [None, ""]:
            with self.assertRaises(BadRequestError) as context:
                verify_signature(self.body, signature, self.app_secret)

            self.assertEqual(context.exception.error_code, MISSING_SIGNATURE)
            self.assertEqual(context.exception.message, "Missing signature header")

    def test_wrong_prefix_is_rejected(self):
        digest = compute_signature(self.body, self.app_secret)[len(SIGNATURE_PREFIX):]

        for signature in [digest, f"sha1={digest}", f"SHA256={digest}"]:
            with self.assertRaises(BadRequestError) as context:
                verify_signature(self.body, signature, self.app_secret)

            self.assertEqual(context.exception.error_code, MALFORMED_SIGNATURE)
            self.assertEqual(context.exception.message, "Invalid signature format")

    def test_non_hex_digest_is_rejected(self):
        with self.assertRaises(BadRequestError) as context:
            verify_signature(self.body, "sha256=not-a-hex-digest", self.app_secret)

        self.assertEqual(context.exception.error_code, MALFORMED_SIGNATURE)

    def test_short_digest_is_rejected(self):
        with self.assertRaises(BadRequestError) as context:
            verify_signature(self.body, "sha256=abcd", self.app_secret)

        self.assertEqual(context.exception.error_code, INVALID_SIGNATURE)

    def test_missing_app_secret(self):
        signature = compute_signature(self.body, self.app_secret)

        for app_secret in [None, ""]:
            with self.assertRaises(ConfigurationError) as context:
                verify_signature(self.body, signature, app_secret)

            self.assertEqual(context.exception.error_code, MISSING_APP_SECRET)
            self.assertEqual(context.exception.http_status, 500)
