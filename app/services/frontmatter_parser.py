import datetime
from typing import Tuple

import yaml
from frontmatter.default_handlers import YAMLHandler

from app.errors import HeaderParseError, MalformedDocument
from app.schemas.blog import PostFrontmatter

FRONTMATTER_DELIMITER = "---"
FRONTMATTER_KEYS = ("title", "description", "date", "slug")

_yaml_handler = YAMLHandler()


def parse_frontmatter(document: str) -> Tuple[PostFrontmatter, str]:
    """
    Split a raw post into its frontmatter header and body.

    Documents that do not open with the delimiter have no header and are
    returned whole as the body. The body is not trimmed here.
    """
    if not document.startswith(FRONTMATTER_DELIMITER):
        return PostFrontmatter(), document

    parts = document.split(FRONTMATTER_DELIMITER, 2)
    if len(parts) < 3:
        raise MalformedDocument("frontmatter is not correctly delimited")

    header_block, body = parts[1], parts[2]
    return _parse_header(header_block), body


def _parse_header(header_block: str) -> PostFrontmatter:
    try:
        metadata = _yaml_handler.load(header_block)
    except yaml.YAMLError as e:
        raise HeaderParseError("error parsing frontmatter", cause=e) from e

    if metadata is None:
        return PostFrontmatter()
    if not isinstance(metadata, dict):
        raise HeaderParseError(
            f"frontmatter must be a mapping, got {type(metadata).__name__}"
        )

    return PostFrontmatter(
        **{
            key: _convert_to_string(metadata[key])
            for key in FRONTMATTER_KEYS
            if key in metadata
        }
    )


def _convert_to_string(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)
