"""
Exceptions raised while parsing and transforming image names
"""


class ImageNameError(ValueError):
    """Base class for recoverable image name failures"""


class InvalidReferenceError(ImageNameError):
    """The string is not a valid image reference"""


class TagError(ImageNameError):
    """A tag could not be applied to an image name"""


class DigestError(ImageNameError):
    """A digest could not be applied to an image name"""


class EmptyNameError(ImageNameError):
    """The operation is undefined on the empty image name"""


class NormalizationFault(RuntimeError):
    """
    A well-formed image name failed to re-parse from its own string form.
    This indicates a bug rather than bad input, so it is not an ImageNameError.
    """
