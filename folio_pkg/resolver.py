"""
Single-post lookup by slug.
"""

from .exceptions import PostNotFound


class SlugResolver:
    """Resolve slugs to file-backed posts. External posts are never resolved."""

    def __init__(self, blog_loader):
        self.blog_loader = blog_loader

    def paths(self):
        """Slugs that need a single-post page."""
        return self.blog_loader.list_slugs()

    def resolve(self, slug):
        return self.blog_loader.load_by_slug(slug)

    def require(self, slug):
        post = self.resolve(slug)
        if post is None:
            raise PostNotFound(slug)
        return post
