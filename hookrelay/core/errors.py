"""Error taxonomy for the relay pipeline.

Every error carries the HTTP status the orchestrator answers with and a
``detail`` string that is safe to send back to the caller.
"""


class RelayError(Exception):
    status_code: int = 500
    detail: str = "Internal Server Error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ConfigurationError(RelayError):
    """A required secret is missing from the environment"""
    status_code = 500
    detail = "Configuration error"


class AuthenticationError(RelayError):
    """Signature header missing or not matching the shared secret"""
    status_code = 403
    detail = "Invalid signature"


class ClassificationError(RelayError):
    """The event key is not one we know how to relay"""
    status_code = 400
    detail = "Unsupported event type"


class ForwardingError(RelayError):
    """Discord rejected the message"""
    status_code = 500

    def __init__(self, status_text: str):
        self.status_text = status_text
        super().__init__(f"Failed to send message to Discord: {status_text}")
