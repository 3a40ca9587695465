"""
Content model for the Folio pipeline.

Blog posts are a tagged variant: ``FileBackedPost`` for Markdown files in the
blog directory and ``ExternalPost`` for links declared in the external-links
catalog. Both expose the same read-only fields so the presentation layer can
treat a collection uniformly.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .utils import format_date


class _PostFields:
    """Read-only helpers shared by both post variants."""

    @property
    def description(self) -> str:
        return self.excerpt or self.title

    @property
    def display_date(self) -> str:
        return format_date(self.date)

    def to_dict(self) -> Dict[str, Any]:
        # Model fields override front matter keys of the same name
        data = dict(getattr(self, 'metadata', {}))
        data.update({
            'slug': self.slug,
            'title': self.title,
            'date': self.date,
            'excerpt': self.excerpt,
            'isExternal': self.is_external,
        })
        if self.is_external:
            data['externalUrl'] = self.external_url
        else:
            data['content'] = self.body
        return data


@dataclass(frozen=True)
class FileBackedPost(_PostFields):
    slug: str
    title: str
    date: str
    body: str
    excerpt: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    is_external = False
    external_url = None


@dataclass(frozen=True)
class ExternalPost(_PostFields):
    slug: str
    title: str
    date: str
    external_url: str
    excerpt: Optional[str] = None

    is_external = True
    body = ''


ContentItem = Union[FileBackedPost, ExternalPost]


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    technologies: Tuple[str, ...] = ()
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None

    @property
    def has_links(self) -> bool:
        return bool(self.github_url or self.live_url)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'title': self.title,
            'description': self.description,
            'technologies': list(self.technologies),
        }
        optional = {
            'githubUrl': self.github_url,
            'liveUrl': self.live_url,
            'category': self.category,
            'date': self.date,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data
