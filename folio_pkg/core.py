import os
import json
import logging
import time
from datetime import datetime

from .posts import BlogLoader
from .projects import ProjectLoader
from .renderer import MarkupRenderer
from .resolver import SlugResolver


class InfoFilter(logging.Filter):
    """Filter to allow only selected INFO messages to be shown in the console."""
    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True
        allowed_messages = [
            "Export completed in",
            "Total posts exported:",
            "Total projects exported:",
            "Exporting content to",
        ]
        return any(msg in record.getMessage() for msg in allowed_messages)


class Folio:
    def __init__(self, blog_dir='content/blog', external_links='content/blog/external-links.json',
                 projects_file='content/projects/projects.json', log_dir=None, renderer=None):
        self.blog_dir = blog_dir
        self.external_links = external_links
        self.projects_file = projects_file
        self.log_dir = log_dir
        self.posts_exported = 0
        self.projects_exported = 0

        self.setup_logging()

        self.blog_loader = BlogLoader(self.blog_dir, self.external_links)
        self.project_loader = ProjectLoader(self.projects_file)
        self.resolver = SlugResolver(self.blog_loader)
        self.renderer = renderer or MarkupRenderer()

    def setup_logging(self):
        """Set up logging configuration."""
        self.logger = logging.getLogger('Folio')
        self.logger.setLevel(logging.DEBUG)

        if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
                   for h in self.logger.handlers):
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_handler.addFilter(InfoFilter())
            console_handler.setFormatter(logging.Formatter('%(message)s'))
            self.logger.addHandler(console_handler)

        if self.log_dir and not any(isinstance(h, logging.FileHandler) for h in self.logger.handlers):
            os.makedirs(self.log_dir, exist_ok=True)
            log_filename = datetime.now().strftime('folio_%Y-%m-%d_%H-%M-%S.log')
            log_filepath = os.path.join(self.log_dir, log_filename)

            file_handler = logging.FileHandler(log_filepath)
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def list_blog_posts(self):
        """All posts, file-backed and external, most recent first."""
        return self.blog_loader.load_all()

    def list_blog_slugs(self):
        return self.resolver.paths()

    def get_blog_post(self, slug):
        """Return the file-backed post for slug, or None."""
        return self.resolver.resolve(slug)

    def list_projects(self):
        return self.project_loader.load_all()

    def render_body(self, post):
        """Render a file-backed post body to HTML."""
        if post.is_external:
            raise ValueError(f"External post '{post.slug}' links to {post.external_url} and is not rendered")
        return self.renderer.render(post.body)

    def build_post_page(self, slug):
        """Everything a single-post page needs, or None when the post does not exist."""
        post = self.get_blog_post(slug)
        if post is None:
            self.logger.info(f"No post found for slug '{slug}'")
            return None
        return {'post': post, 'content_html': self.render_body(post)}

    def export(self, output_dir):
        """Write the blog and project collections as JSON for the presentation layer."""
        start_time = time.time()
        self.logger.info(f"Exporting content to {output_dir}")

        posts_dir = os.path.join(output_dir, 'blog')
        os.makedirs(posts_dir, exist_ok=True)

        posts = self.list_blog_posts()
        projects = self.list_projects()

        self._write_json(os.path.join(output_dir, 'posts.json'), [post.to_dict() for post in posts])
        self._write_json(os.path.join(output_dir, 'projects.json'), [project.to_dict() for project in projects])

        self.posts_exported = 0
        for slug in self.list_blog_slugs():
            page = self.build_post_page(slug)
            if page is None:
                continue
            data = page['post'].to_dict()
            data['contentHtml'] = page['content_html']
            data['displayDate'] = page['post'].display_date
            self._write_json(os.path.join(posts_dir, f'{slug}.json'), data)
            self.posts_exported += 1
        self.projects_exported = len(projects)

        self.logger.info(f"Export completed in {time.time() - start_time:.6f} seconds.")
        self.logger.info(f"Total posts exported: {self.posts_exported}")
        self.logger.info(f"Total projects exported: {self.projects_exported}")

    def _write_json(self, path, data):
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            self.logger.debug(f"Wrote {path}")
        except (IOError, OSError, PermissionError) as e:
            self.logger.error(f"Failed to write {path}: {e}")
            raise
