"""
Content digest of an image, e.g. sha256:<hex>
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Digest:
    """
    A content digest string. Values are stored as given; validating them is
    left to the reference parser when a digest is applied to a name.
    """
    value: str

    def __str__(self) -> str:
        return self.value


EMPTY_DIGEST = Digest('')
