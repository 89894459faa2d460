"""Core of deepl_bindings.

This package holds the request encoder, the response decoder, the status code classification
and the DeepLClient built on top of them.
"""

from deepl_bindings.core.client import DeepLClient
from deepl_bindings.core.encoder import MAX_BODY_SIZE
from deepl_bindings.core.error_mapper import STATUS_QUOTA_EXCEEDED

__all__: list[str] = ["MAX_BODY_SIZE", "STATUS_QUOTA_EXCEEDED", "DeepLClient"]
