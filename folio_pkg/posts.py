"""
Blog collection loading: Markdown posts plus the external-links catalog.
"""

import logging
import os
from collections import Counter
from types import MappingProxyType

from .catalog import load_catalog, optional_string, required_string
from .exceptions import MalformedRecord, MissingStore
from .front_matter import read_front_matter
from .models import ExternalPost, FileBackedPost
from .sorting import sort_posts
from .utils import normalize_date

POST_EXTENSION = '.md'
EXTERNAL_SLUG_PREFIX = 'external-'


def external_slug(date):
    """Slug for an external post. Posts sharing a date share a slug."""
    return f"{EXTERNAL_SLUG_PREFIX}{date}"


def is_safe_slug(slug):
    """A slug must name a file directly inside the blog directory."""
    if not isinstance(slug, str) or not slug.strip():
        return False
    if '/' in slug or '\\' in slug or '\x00' in slug:
        return False
    return slug not in ('.', '..') and not slug.startswith('.')


class BlogLoader:
    def __init__(self, blog_dir, external_links_path=None):
        self.blog_dir = blog_dir
        self.external_links_path = external_links_path
        self.logger = logging.getLogger('Folio.posts')

    def load_all(self):
        """Load file-backed and external posts, most recent first."""
        posts = self.load_file_posts() + self.load_external_posts()
        return sort_posts(posts)

    def list_slugs(self):
        """Slugs of file-backed posts only."""
        return [os.path.splitext(name)[0] for name in self._post_files()]

    def load_by_slug(self, slug):
        """Load a single file-backed post, or None if there is no such post."""
        if not is_safe_slug(slug):
            self.logger.warning(f"Rejected unsafe post slug: {slug!r}")
            return None

        file_path = os.path.join(self.blog_dir, f'{slug}{POST_EXTENSION}')
        if not os.path.isfile(file_path):
            return None

        try:
            return self.parse_post(file_path, slug)
        except MalformedRecord as e:
            self.logger.warning(f"Skipping malformed post {e}")
            return None

    def load_file_posts(self):
        posts = []
        for file_name in self._post_files():
            file_path = os.path.join(self.blog_dir, file_name)
            slug = os.path.splitext(file_name)[0]
            try:
                posts.append(self.parse_post(file_path, slug))
            except MalformedRecord as e:
                self.logger.warning(f"Skipping malformed post {e}")
            except (IOError, OSError, PermissionError) as e:
                self.logger.error(f"Failed to read post file {file_path}: {e}")
        self.logger.debug(f"Loaded {len(posts)} posts from {self.blog_dir}")
        return posts

    def load_external_posts(self):
        try:
            records = load_catalog(self.external_links_path)
        except MissingStore as e:
            self.logger.debug(str(e))
            return []
        except MalformedRecord as e:
            self.logger.warning(f"Ignoring external links catalog {e}")
            return []

        posts = []
        for index, record in enumerate(records):
            source = f"{self.external_links_path}[{index}]"
            try:
                posts.append(self.parse_external(record, source))
            except MalformedRecord as e:
                self.logger.warning(f"Skipping malformed external link {e}")

        duplicates = [slug for slug, count in Counter(p.slug for p in posts).items() if count > 1]
        for slug in duplicates:
            self.logger.warning(f"Multiple external links share the slug '{slug}'")

        return posts

    def parse_post(self, file_path, slug):
        """Build a FileBackedPost from a Markdown file."""
        metadata, body = read_front_matter(file_path)
        title = required_string(metadata, 'title', file_path)
        date = required_string(metadata, 'date', file_path)
        excerpt = optional_string(metadata, 'excerpt', file_path)
        return FileBackedPost(
            slug=slug,
            title=title,
            date=date,
            body=body,
            excerpt=excerpt,
            metadata=MappingProxyType(metadata),
        )

    def parse_external(self, record, source=None):
        """Build an ExternalPost from a catalog record."""
        if not isinstance(record, dict):
            raise MalformedRecord("record must be an object", source)
        record = {key: normalize_date(value) for key, value in record.items()}
        title = required_string(record, 'title', source)
        date = required_string(record, 'date', source)
        external_url = required_string(record, 'externalUrl', source)
        excerpt = optional_string(record, 'excerpt', source)
        return ExternalPost(
            slug=external_slug(date),
            title=title,
            date=date,
            external_url=external_url,
            excerpt=excerpt,
        )

    def _post_files(self):
        if not self.blog_dir or not os.path.isdir(self.blog_dir):
            self.logger.debug(str(MissingStore(self.blog_dir)))
            return []
        return sorted(
            name for name in os.listdir(self.blog_dir)
            if name.endswith(POST_EXTENSION) and not name.startswith('.')
            and os.path.isfile(os.path.join(self.blog_dir, name))
        )
