"""Tests for the Folio collection API."""

import json
import os
from pathlib import Path

import pytest

from folio_pkg import Folio


@pytest.fixture
def folio(blog_dir, external_links_file, projects_file):
    return Folio(
        blog_dir=blog_dir,
        external_links=external_links_file,
        projects_file=projects_file,
    )


class TestFolio:
    """Test cases for Folio."""

    def test_list_blog_posts(self, folio):
        posts = folio.list_blog_posts()
        assert len(posts) == 5
        assert posts[0].slug == 'summer-update'
        assert posts[-1].slug == 'external-2022-10-01'

    def test_list_blog_slugs(self, folio):
        assert folio.list_blog_slugs() == ['first-post', 'summer-update', 'year-end']

    def test_get_blog_post(self, folio):
        post = folio.get_blog_post('year-end')
        assert post.title == 'Year End'

    def test_get_blog_post_not_found(self, folio):
        assert folio.get_blog_post('nonexistent-slug') is None

    def test_list_projects(self, folio):
        assert [p.title for p in folio.list_projects()] == ['Mobile App', 'Old Library', 'Experiments']

    def test_render_body(self, folio):
        html = folio.render_body(folio.get_blog_post('first-post'))
        assert '<h1>First Post</h1>' in html
        assert '<strong>world</strong>' in html

    def test_render_body_rejects_external_posts(self, folio):
        external = next(p for p in folio.list_blog_posts() if p.is_external)
        with pytest.raises(ValueError, match="not rendered"):
            folio.render_body(external)

    def test_build_post_page(self, folio):
        page = folio.build_post_page('summer-update')
        assert page['post'].slug == 'summer-update'
        assert '<em>news</em>' in page['content_html']

    def test_build_post_page_not_found(self, folio):
        assert folio.build_post_page('external-2024-03-15') is None

    def test_stores_are_rescanned_on_every_call(self, folio, blog_dir):
        assert len(folio.list_blog_slugs()) == 3
        Path(blog_dir, 'late-post.md').write_text("---\ntitle: Late\ndate: 2025-01-01\n---\nNew.\n")
        assert folio.list_blog_posts()[0].slug == 'late-post'
        assert 'late-post' in folio.list_blog_slugs()

    def test_empty_stores(self, missing_path):
        folio = Folio(
            blog_dir=missing_path,
            external_links=os.path.join(missing_path, 'links.json'),
            projects_file=os.path.join(missing_path, 'projects.json'),
        )
        assert folio.list_blog_posts() == []
        assert folio.list_blog_slugs() == []
        assert folio.list_projects() == []

    def test_log_dir_creates_log_file(self, blog_dir, temp_dir):
        log_dir = os.path.join(temp_dir, 'logs')
        Folio(blog_dir=blog_dir, log_dir=log_dir)
        assert any(name.startswith('folio_') for name in os.listdir(log_dir))


class TestExport:
    """Test cases for Folio.export."""

    def test_export_writes_collections(self, folio, temp_dir):
        output_dir = os.path.join(temp_dir, 'output')
        folio.export(output_dir)

        with open(os.path.join(output_dir, 'posts.json'), encoding='utf-8') as f:
            posts = json.load(f)
        assert [p['slug'] for p in posts][:2] == ['summer-update', 'external-2024-03-15']
        assert posts[1]['externalUrl'] == 'https://example.com/guest-post'

        with open(os.path.join(output_dir, 'projects.json'), encoding='utf-8') as f:
            projects = json.load(f)
        assert [p['title'] for p in projects] == ['Mobile App', 'Old Library', 'Experiments']

    def test_export_writes_one_page_per_file_backed_post(self, folio, temp_dir):
        output_dir = os.path.join(temp_dir, 'output')
        folio.export(output_dir)

        assert sorted(os.listdir(os.path.join(output_dir, 'blog'))) == [
            'first-post.json', 'summer-update.json', 'year-end.json',
        ]
        with open(os.path.join(output_dir, 'blog', 'first-post.json'), encoding='utf-8') as f:
            page = json.load(f)
        assert '<h1>First Post</h1>' in page['contentHtml']
        assert page['displayDate'] == 'January 1, 2024'
        assert folio.posts_exported == 3
        assert folio.projects_exported == 3
