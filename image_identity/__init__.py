"""
Canonical identity for container images: names, digests and image ids
"""
from .digest import Digest, EMPTY_DIGEST
from .errors import (
    DigestError,
    EmptyNameError,
    ImageNameError,
    InvalidReferenceError,
    NormalizationFault,
    TagError,
)
from .image_id import EMPTY_ID, ImageId
from .name import EMPTY_NAME, Name

__version__ = '0.1.0'
