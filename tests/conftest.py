"""Test configuration and fixtures for Folio tests."""

import json
import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def blog_dir(temp_dir):
    """Create a blog directory with three valid posts."""
    blog_dir = Path(temp_dir) / 'content' / 'blog'
    blog_dir.mkdir(parents=True)

    (blog_dir / 'first-post.md').write_text("""---
title: First Post
date: 2024-01-01
excerpt: Where it all started.
tags: [intro]
---

# First Post

Hello **world**.
""", encoding='utf-8')

    (blog_dir / 'summer-update.md').write_text("""---
title: Summer Update
date: "2024-06-01"
---

Some *news* from the summer.
""", encoding='utf-8')

    (blog_dir / 'year-end.md').write_text("""---
title: Year End
date: 2023-12-31
---

Looking back.
""", encoding='utf-8')

    return str(blog_dir)


@pytest.fixture
def external_links_file(blog_dir):
    """Create an external-links catalog next to the posts."""
    links_path = Path(blog_dir) / 'external-links.json'
    links_path.write_text(json.dumps([
        {
            'title': 'Guest Post',
            'date': '2024-03-15',
            'excerpt': 'Written for another site.',
            'externalUrl': 'https://example.com/guest-post',
        },
        {
            'title': 'Conference Talk Notes',
            'date': '2022-10-01',
            'externalUrl': 'https://example.org/talk',
        },
    ]), encoding='utf-8')
    return str(links_path)


@pytest.fixture
def projects_file(temp_dir):
    """Create a project catalog."""
    projects_dir = Path(temp_dir) / 'content' / 'projects'
    projects_dir.mkdir(parents=True)
    projects_path = projects_dir / 'projects.json'
    projects_path.write_text(json.dumps([
        {
            'title': 'Old Library',
            'description': 'A parsing library.',
            'technologies': ['Python'],
            'githubUrl': 'https://github.com/example/old-library',
            'date': '2021-05-01',
        },
        {
            'title': 'Mobile App',
            'description': 'An app for phones.',
            'technologies': ['Kotlin', 'Swift'],
            'liveUrl': 'https://app.example.com',
            'category': 'Mobile',
            'date': '2023-09-12',
        },
        {
            'title': 'Experiments',
            'description': 'Assorted prototypes.',
            'technologies': [],
        },
    ]), encoding='utf-8')
    return str(projects_path)


@pytest.fixture
def missing_path(temp_dir):
    """A path inside the temp dir that does not exist."""
    return os.path.join(temp_dir, 'does-not-exist')


@pytest.fixture(autouse=True)
def reset_folio_logger():
    """Drop handlers Folio attaches so each test starts with a clean logger."""
    yield
    logger = logging.getLogger('Folio')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
