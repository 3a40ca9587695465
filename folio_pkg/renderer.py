"""
Markdown to HTML rendering for blog post bodies.
"""

import mistune

DEFAULT_PLUGINS = ['table', 'task_lists', 'strikethrough']


class PostRenderer(mistune.HTMLRenderer):
    """HTML renderer that escapes raw HTML and tags fenced code with its language."""

    def __init__(self):
        super().__init__(escape=True)

    def block_code(self, code, info=None):
        escaped_code = mistune.escape(code)
        if info and info.strip():
            language = mistune.escape(info.strip().split(None, 1)[0])
            return '<pre><code class="language-{}">{}</code></pre>\n'.format(language, escaped_code)
        return '<pre><code>{}</code></pre>\n'.format(escaped_code)


class MarkupRenderer:
    """Convert Markdown post bodies into display HTML."""

    def __init__(self, plugins=None):
        self.plugins = list(DEFAULT_PLUGINS if plugins is None else plugins)
        self.markdown_parser = self.create_markdown_parser()

    def create_markdown_parser(self):
        """Create a Mistune markdown parser with the post renderer."""
        return mistune.create_markdown(renderer=PostRenderer(), plugins=self.plugins)

    def render(self, body):
        """Convert markdown text to HTML."""
        if not body:
            return ''
        return self.markdown_parser(body)


_default_renderer = None


def render(body):
    """Render a post body with a shared default renderer."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MarkupRenderer()
    return _default_renderer.render(body)
