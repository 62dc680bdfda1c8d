"""
Image ids: digest-shaped strings derived from an image's contents, not its name
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageId:
    value: str

    def __str__(self) -> str:
        return self.value

    def filename(self) -> str:
        """
        Filesystem-friendly form of the id

        Windows filenames cannot contain ":", so every colon becomes a hyphen.
        """
        return self.value.replace(':', '-')


EMPTY_ID = ImageId('')
