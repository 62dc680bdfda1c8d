"""
Container image reference parser
Wraps the docker_image reference grammar and its Docker Hub
normalization (default host, legacy host, official namespace)
"""
import logging
from typing import Optional, Tuple

from docker_image import reference

from .errors import InvalidReferenceError

logger = logging.getLogger(__name__)

DOCKER_HUB_HOST = 'docker.io'
LEGACY_DOCKER_HUB_HOST = 'index.docker.io'
OFFICIAL_NAMESPACE = 'library'


class ImageParser:
    """
    Parse container image references into docker_image references
    Every constructor re-parses a rendered string, so grammar rules live in one place
    """

    @staticmethod
    def parse(raw: str) -> reference.Reference:
        """
        Parse a reference without normalizing it

        Args:
            raw: Reference string (e.g., library/ubuntu:18.10)

        Returns:
            docker_image reference with name, tag and digest entries

        Raises:
            InvalidReferenceError: raw violates the reference grammar
        """
        try:
            return reference.Reference.parse(raw)
        except (reference.InvalidReference, TypeError) as e:
            raise InvalidReferenceError(str(e) or 'invalid reference format') from e

    @staticmethod
    def parse_normalized(raw: str) -> reference.Reference:
        """
        Parse a reference and normalize it to its fully qualified form

        Args:
            raw: Reference string as a user would type it

        Returns:
            docker_image reference whose name always starts with a host

        Examples:
            ubuntu -> docker.io/library/ubuntu
            index.docker.io/ubuntu:18.10 -> docker.io/library/ubuntu:18.10
            gcr.io/project/app:v1 -> gcr.io/project/app:v1
        """
        if not raw:
            raise InvalidReferenceError('invalid reference format')
        try:
            ref = reference.Reference.parse_normalized_named(raw)
        except (reference.InvalidReference, TypeError) as e:
            raise InvalidReferenceError(str(e) or 'invalid reference format') from e
        logger.debug(f'Normalized image reference {raw} to {ImageParser.to_string(ref)}')
        return ref

    @staticmethod
    def split_host(repository: str) -> Optional[Tuple[str, str]]:
        """
        Split a repository name on its first "/" into host and path

        Returns:
            (host, path), or None when the name carries no host and must be
            normalized before it can be split
        """
        parts = repository.split('/', 1)
        if len(parts) == 1 or not is_host(parts[0]):
            return None
        return parts[0], parts[1]

    @staticmethod
    def render(name: str, tag: Optional[str] = None, digest: Optional[str] = None) -> str:
        """Render name[:tag][@digest]"""
        rendered = name
        if tag:
            rendered = f'{rendered}:{tag}'
        if digest:
            rendered = f'{rendered}@{digest}'
        return rendered

    @staticmethod
    def to_string(ref: reference.Reference) -> str:
        return ImageParser.render(ref['name'], ref.get('tag'), ref.get('digest'))

    @staticmethod
    def with_name(name: str) -> reference.Reference:
        """Build a reference with no tag or digest from a repository name"""
        ref = ImageParser.parse(name)
        if ref['name'] != name or ref.get('tag') or ref.get('digest'):
            raise InvalidReferenceError('invalid name format')
        return ref

    @staticmethod
    def with_tag(ref: reference.Reference, tag: str) -> reference.Reference:
        """Apply tag to ref, replacing any existing tag and keeping its digest"""
        candidate = ImageParser.render(ref['name'], tag, ref.get('digest'))
        try:
            tagged = ImageParser.parse(candidate)
        except InvalidReferenceError as e:
            raise InvalidReferenceError('invalid tag format') from e
        if not _matches(tagged, ref['name'], tag, ref.get('digest')):
            raise InvalidReferenceError('invalid tag format')
        return tagged

    @staticmethod
    def with_digest(ref: reference.Reference, digest: str) -> reference.Reference:
        """Apply digest to ref, replacing any existing digest and keeping its tag"""
        candidate = ImageParser.render(ref['name'], ref.get('tag'), digest)
        try:
            digested = ImageParser.parse(candidate)
        except InvalidReferenceError as e:
            raise InvalidReferenceError('invalid digest format') from e
        if not _matches(digested, ref['name'], ref.get('tag'), digest):
            raise InvalidReferenceError('invalid digest format')
        return digested

    @staticmethod
    def without_tag(ref: reference.Reference) -> reference.Reference:
        return ImageParser.parse(ImageParser.render(ref['name'], digest=ref.get('digest')))


def is_host(segment: str) -> bool:
    """Whether the first segment of a name is a registry host rather than a namespace"""
    return '.' in segment or ':' in segment or segment == 'localhost'


def _matches(ref: reference.Reference, name: str, tag: Optional[str], digest: Optional[str]) -> bool:
    return ref['name'] == name and ref.get('tag') == tag and ref.get('digest') == digest
