"""
Folio - content pipeline for a portfolio and blog site.

Folio loads Markdown blog posts with YAML front matter, a catalog of
externally hosted posts and a project catalog, orders them for presentation
and renders post bodies to HTML.
"""

__version__ = "1.0.0"

from .core import Folio
from .exceptions import FolioError, MalformedRecord, MissingStore, PostNotFound
from .models import ContentItem, ExternalPost, FileBackedPost, Project
from .renderer import MarkupRenderer, render

__all__ = [
    'Folio',
    'FolioError',
    'MalformedRecord',
    'MissingStore',
    'PostNotFound',
    'ContentItem',
    'ExternalPost',
    'FileBackedPost',
    'Project',
    'MarkupRenderer',
    'render',
]
