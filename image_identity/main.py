"""
Command line entry point for describing container image names
Prints the canonical form and synonyms of each image as JSON
"""
import argparse
import json
import logging
import os
import sys
from typing import Dict, List, Optional

from .errors import ImageNameError
from .name import Name

logger = logging.getLogger(__name__)


def describe_image(image: str) -> Dict:
    """
    Describe a container image name

    Args:
        image: Image reference as supplied by the user

    Returns:
        Dictionary with the parsed components:
            - registry: Registry hostname
            - repository: Repository path
            - tag: Image tag (empty if untagged)
            - digest: Image digest (empty if absent)
            - full_name: Canonical image reference
            - synonyms: Every equivalent way of writing the reference, sorted

    Raises:
        ImageNameError: image is not a valid reference
    """
    name = Name.parse(image)
    return {
        'image': image,
        'registry': name.host,
        'repository': name.path,
        'tag': name.tag,
        'digest': str(name.digest),
        'full_name': str(name),
        'synonyms': sorted(str(s) for s in name.synonyms())
    }


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='image-identity',
        description='Normalize container image names and list their synonyms'
    )
    parser.add_argument('images', nargs='+', metavar='IMAGE', help='image reference, e.g. ubuntu:18.10')
    parser.add_argument(
        '--log-level',
        default=os.environ.get('IMAGE_IDENTITY_LOG_LEVEL', 'INFO'),
        help='logging level (default: $IMAGE_IDENTITY_LOG_LEVEL or INFO)'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    results = []
    failed = 0
    for image in args.images:
        logger.debug(f'Processing image: {image}')
        try:
            results.append(describe_image(image))
        except ImageNameError as e:
            logger.error(f'Error processing image {image}: {str(e)}')
            results.append({'image': image, 'error': str(e)})
            failed += 1

    print(json.dumps(results, indent=2))

    if failed:
        logger.warning(f'{failed} of {len(args.images)} images could not be parsed')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
