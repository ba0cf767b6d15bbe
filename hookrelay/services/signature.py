import hashlib
import hmac
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="


def canonical_body(body: Any) -> bytes:
    """
    Bytes the sender signed.

    Raw bytes and text are used untouched. A body that was already parsed
    can only be re-serialized, which matches the sender's bytes as long as
    it used compact JSON without ASCII escaping.
    """
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode()
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode()


def sign_payload(body: Any, secret: str) -> str:
    """Compute the ``sha256=<hex>`` header value for a body"""
    digest = hmac.new(secret.encode(), canonical_body(body), hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(body: Any, provided_signature: Any, secret: Any) -> bool:
    """
    Validate the Bitbucket ``X-Hub-Signature`` header against the body.

    Never raises: anything malformed is simply not a valid signature.
    """
    if not isinstance(provided_signature, str) or not isinstance(secret, str) or not secret:
        return False

    try:
        expected = sign_payload(body, secret).encode()
        provided = provided_signature.encode("ascii")
    except (TypeError, ValueError) as e:
        logger.debug(f"Cannot compute signature for request body: {type(e).__name__}")
        return False

    # Lengths are public (the hex digest is fixed-size), only the bytes must
    # be compared in constant time
    if len(provided) != len(expected):
        return False

    return hmac.compare_digest(provided, expected)
