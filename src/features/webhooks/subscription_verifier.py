import hmac

from util.error_codes import WEBHOOK_VERIFICATION_FAILED
from util.errors import AuthorizationError

SUBSCRIBE_MODE = "subscribe"


def verify_subscription(mode: str | None, challenge: str | None, token: str | None, expected_token: str) -> str:
    """Answers the webhook registration handshake by echoing the challenge back."""
    token_matches = hmac.compare_digest((token or "").encode("utf-8"), expected_token.encode("utf-8"))
    if mode != SUBSCRIBE_MODE or not token_matches or challenge is None:
        raise AuthorizationError("Webhook verification failed", WEBHOOK_VERIFICATION_FAILED)
    return challenge
