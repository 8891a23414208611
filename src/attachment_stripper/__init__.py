"""Attachment stripper - parsed email in, inline body and attachments out."""

# Models
from .models import (
    AttachmentRecord,
    StripResult,
)

# Processing
from .processing import MimeAccessor, Stripper, TraversalState

# Configuration
from .config import StripperConfig

# Errors
from .exceptions import InvalidInputError, StripperError

__version__ = "1.1.0"

__all__ = [
    # Models
    "AttachmentRecord",
    "StripResult",
    # Components
    "Stripper",
    "MimeAccessor",
    "TraversalState",
    "StripperConfig",
    # Errors
    "StripperError",
    "InvalidInputError",
]
