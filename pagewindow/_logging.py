import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("pagewindow")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_key(value: Any) -> str:
    """
    Hashes a partition key value for logging.
    Page requests on the same partition stay correlatable without revealing PII.
    """
    return hashlib.sha256(str(value).encode("utf-8")).hexdigest()[:8]
