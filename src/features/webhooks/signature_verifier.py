import hashlib
import hmac

from util.error_codes import INVALID_SIGNATURE, MALFORMED_SIGNATURE, MISSING_APP_SECRET, MISSING_SIGNATURE
from util.errors import BadRequestError, ConfigurationError

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="


def compute_signature(body: bytes, app_secret: str) -> str:
    digest = hmac.new(app_secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(body: bytes, signature_header: str | None, app_secret: str | None) -> None:
    """
    Verifies the platform's HMAC-SHA256 signature over the exact raw body bytes.
    https://developers.facebook.com/docs/graph-api/webhooks/getting-started#event-notifications

    Raises `BadRequestError` for a missing, malformed or mismatched signature.
    The body is only read, so it stays available for decoding afterwards.
    """
    if not app_secret:
        raise ConfigurationError("App secret is not configured", MISSING_APP_SECRET)
    if not signature_header:
        raise BadRequestError("Missing signature header", MISSING_SIGNATURE)
    if not signature_header.startswith(SIGNATURE_PREFIX):
        raise BadRequestError("Invalid signature format", MALFORMED_SIGNATURE)
    try:
        received_digest = bytes.fromhex(signature_header[len(SIGNATURE_PREFIX):])
    except ValueError as e:
        raise BadRequestError("Invalid signature format", MALFORMED_SIGNATURE) from e
    expected_digest = hmac.new(app_secret.encode("utf-8"), body, hashlib.sha256).digest()
    if not hmac.compare_digest(received_digest, expected_digest):
        raise BadRequestError("Invalid signature", INVALID_SIGNATURE)
