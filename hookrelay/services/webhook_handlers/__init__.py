from .base import WebhookHandler
from .bitbucket import BitbucketWebhookHandler

__all__ = [
    "WebhookHandler",
    "BitbucketWebhookHandler",
]
