"""
YAML front matter parsing for Markdown content files.

A content file optionally starts with a ``---`` line, followed by a YAML
mapping and a closing ``---`` (or ``...``) line. Everything after the closing
line is the Markdown body.
"""

import yaml

from .exceptions import MalformedRecord
from .utils import normalize_date

OPENING_DELIMITER = '---'
CLOSING_DELIMITERS = ('---', '...')


def parse_front_matter(text, source=None):
    """
    Split raw file text into a metadata dict and the body string.

    Args:
        text: Raw file contents
        source: Optional file name used in error messages

    Returns:
        Tuple of (metadata, body). Files without front matter yield ({}, text).

    Raises:
        MalformedRecord: If the block is unterminated or is not a YAML mapping
    """
    if text.startswith('\ufeff'):
        text = text[1:]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != OPENING_DELIMITER:
        return {}, text

    closing_index = None
    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_DELIMITERS:
            closing_index = index
            break

    if closing_index is None:
        raise MalformedRecord("unterminated front matter block", source)

    block = ''.join(lines[1:closing_index])
    try:
        metadata = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise MalformedRecord(f"invalid YAML front matter: {e}", source) from e

    if metadata is None:
        metadata = {}
    elif not isinstance(metadata, dict):
        raise MalformedRecord(
            f"front matter must be a mapping, got {type(metadata).__name__}", source
        )

    metadata = {str(key): normalize_date(value) for key, value in metadata.items()}
    body = ''.join(lines[closing_index + 1:]).lstrip('\r\n')
    return metadata, body


def read_front_matter(filepath):
    """Read a Markdown file and parse its front matter."""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise MalformedRecord(f"file is not valid UTF-8: {e}", filepath) from e
    return parse_front_matter(content, source=filepath)


def dump_front_matter(metadata, body=''):
    """Serialize metadata and body back into a front matter document."""
    block = yaml.safe_dump(dict(metadata), sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"{OPENING_DELIMITER}\n{block}{OPENING_DELIMITER}\n\n{body}"
