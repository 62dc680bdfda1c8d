"""
Named container image references and their Docker Hub synonyms
"""
import logging
from typing import Optional, Set, Tuple

from docker_image import reference

from .digest import Digest, EMPTY_DIGEST
from .errors import DigestError, EmptyNameError, InvalidReferenceError, NormalizationFault, TagError
from .image_parser import DOCKER_HUB_HOST, LEGACY_DOCKER_HUB_HOST, OFFICIAL_NAMESPACE, ImageParser

logger = logging.getLogger(__name__)


class Name:
    """
    A named image reference: host, repository path, optional tag and optional digest

    Names built with Name.parse are normalized (docker.io/library/ubuntu for
    "ubuntu"). Synonyms may be un-normalized, e.g. "ubuntu" with no host.
    Names are immutable; every transformation returns a new Name. Two names
    are equal when their string forms are equal.
    """

    def __init__(self, ref: Optional[reference.Reference] = None):
        self._ref = ref

    @classmethod
    def parse(cls, raw: str) -> 'Name':
        """
        Parse and normalize an image reference

        Args:
            raw: Image reference (e.g., ubuntu, ubuntu:18.10, gcr.io/project/app@sha256:...)

        Raises:
            InvalidReferenceError: raw is empty or not a valid reference
        """
        return cls(ImageParser.parse_normalized(raw))

    @property
    def is_empty(self) -> bool:
        return self._ref is None

    def normalize(self) -> 'Name':
        """Re-parse the string form so the name carries its host and namespace"""
        if self._ref is None:
            return EMPTY_NAME
        try:
            return Name.parse(str(self))
        except InvalidReferenceError as e:
            logger.error(f'Image name {self} failed to normalize: {str(e)}')
            raise NormalizationFault(f'cannot normalize image name {self}: {e}') from e

    @property
    def repository(self) -> str:
        """The name without tag or digest, e.g. docker.io/library/ubuntu"""
        return self._require_ref()['name']

    @property
    def host(self) -> str:
        host, _ = self._host_path()
        return host

    @property
    def path(self) -> str:
        _, path = self._host_path()
        return path

    @property
    def tag(self) -> str:
        if self._ref is None:
            return ''
        return self._ref.get('tag') or ''

    @property
    def digest(self) -> Digest:
        if self._ref is None or not self._ref.get('digest'):
            return EMPTY_DIGEST
        return Digest(self._ref['digest'])

    def with_tag(self, tag: str) -> 'Name':
        """
        Return this name with tag applied, replacing any existing tag

        Raises:
            TagError: tag is not a valid tag
        """
        ref = self._require_ref()
        try:
            return Name(ImageParser.with_tag(ref, tag))
        except InvalidReferenceError as e:
            raise TagError(f'Cannot apply tag {tag} to image name {self}: {e}') from e

    def without_tag(self) -> 'Name':
        """Return this name with any tag removed; the digest is kept"""
        if not self.tag:
            return self
        try:
            return Name(ImageParser.without_tag(self._ref))
        except InvalidReferenceError as e:
            logger.error(f'Image name {self} failed to re-parse without its tag: {str(e)}')
            raise NormalizationFault(f'cannot remove tag from image name {self}: {e}') from e

    def with_digest(self, digest: Digest) -> 'Name':
        """
        Return this name with digest applied, keeping any tag

        Raises:
            DigestError: digest is not a valid digest string
        """
        ref = self._require_ref()
        try:
            return Name(ImageParser.with_digest(ref, str(digest)))
        except InvalidReferenceError as e:
            raise DigestError(f'Cannot apply digest {digest} to image name {self}: {e}') from e

    def without_digest(self) -> str:
        return self.repository.split('@')[0]

    def synonyms(self) -> Set['Name']:
        """
        Return the names a user could write for the same image

        Docker Hub images may be written with host docker.io, with the legacy
        host index.docker.io, or with no host at all, and official images may
        also omit the library/ namespace. Names on other registries have no
        synonyms besides themselves. Tag and digest are kept on every synonym.
        Synonyms are not necessarily normalized: some have no host.
        """
        if self._ref is None:
            return {EMPTY_NAME}

        host, path = self._host_path()
        names = {self}

        if host == DOCKER_HUB_HOST:
            candidates = [path]

            segments = path.split('/')
            if len(segments) == 2 and segments[0] == OFFICIAL_NAMESPACE:
                candidates.append(segments[1])

            candidates.append(f'{LEGACY_DOCKER_HUB_HOST}/{path}')
            candidates.append(f'{DOCKER_HUB_HOST}/{path}')

            for candidate in candidates:
                synonym = self._synonym(candidate)
                if synonym is not None:
                    names.add(synonym)

        return names

    def _synonym(self, repository: str) -> Optional['Name']:
        # Invalid candidates are dropped rather than failing the whole set
        try:
            ref = ImageParser.with_name(repository)
            if self.tag:
                ref = ImageParser.with_tag(ref, self.tag)
            if self.digest != EMPTY_DIGEST:
                ref = ImageParser.with_digest(ref, str(self.digest))
        except InvalidReferenceError as e:
            logger.debug(f'Skipping synonym {repository} of image name {self}: {str(e)}')
            return None
        return Name(ref)

    def _host_path(self) -> Tuple[str, str]:
        """
        Split the repository into host and path. A name without a host
        (such as the synonym "ubuntu") is normalized first and split again.
        """
        split = ImageParser.split_host(self.repository)
        if split is None:
            split = ImageParser.split_host(self.normalize().repository)
        if split is None:
            raise NormalizationFault(f'normalized image name {self} has no host')
        return split

    def _require_ref(self) -> reference.Reference:
        if self._ref is None:
            raise EmptyNameError('operation is undefined on the empty image name')
        return self._ref

    def __str__(self) -> str:
        if self._ref is None:
            return ''
        return ImageParser.to_string(self._ref)

    def __repr__(self) -> str:
        return f'Name({str(self)!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


EMPTY_NAME = Name()
