#!/usr/bin/env python3
"""
Command-line interface for Folio.
"""

import os
import sys
import json
import argparse
from typing import List, Optional
from . import __version__
from .core import Folio
from .settings import FolioSettings

SAMPLE_POST = """---
title: "Hello, World"
date: 2025-01-15
excerpt: "The first post on this site."
---

# Hello, World

This post lives in `content/blog/hello-world.md`. The file name is its slug.

- Write posts in **Markdown**
- Add front matter with a `title` and a `date`
"""

SAMPLE_EXTERNAL_LINKS = [
    {
        "title": "A Post Published Elsewhere",
        "date": "2025-01-10",
        "excerpt": "Externally hosted posts link out instead of rendering here.",
        "externalUrl": "https://example.com/posts/elsewhere",
    }
]

SAMPLE_PROJECTS = [
    {
        "title": "Sample Project",
        "description": "Describe what the project does.",
        "technologies": ["Python", "Markdown"],
        "githubUrl": "https://github.com/example/sample-project",
        "category": "Tools",
        "date": "2025-01-01",
    }
]


def create_starter_structure(base_dir: Optional[str] = None) -> None:
    """Create sample blog posts, external links, and a project catalog."""
    base_dir = base_dir or os.getcwd()

    for directory in ['content/blog', 'content/projects']:
        dir_path = os.path.join(base_dir, directory)
        if os.path.exists(dir_path):
            print(f"Directory already exists: {directory}")
        else:
            os.makedirs(dir_path, exist_ok=True)
            print(f"Created directory: {directory}")

    starter_files = [
        ('content/blog/hello-world.md', SAMPLE_POST),
        ('content/blog/external-links.json', json.dumps(SAMPLE_EXTERNAL_LINKS, indent=2) + '\n'),
        ('content/projects/projects.json', json.dumps(SAMPLE_PROJECTS, indent=2) + '\n'),
    ]
    for relative_path, content in starter_files:
        file_path = os.path.join(base_dir, relative_path)
        if os.path.exists(file_path):
            print(f"File already exists: {relative_path}")
        else:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(content)
            print(f"Created file: {relative_path}")


def print_posts(folio: Folio, as_json: bool) -> None:
    posts = folio.list_blog_posts()
    if as_json:
        print(json.dumps([post.to_dict() for post in posts], indent=2, ensure_ascii=False, default=str))
        return
    for post in posts:
        marker = f" -> {post.external_url}" if post.is_external else ""
        print(f"{post.date}  {post.slug}  {post.title}{marker}")


def print_projects(folio: Folio, as_json: bool) -> None:
    projects = folio.list_projects()
    if as_json:
        print(json.dumps([project.to_dict() for project in projects], indent=2, ensure_ascii=False))
        return
    for project in projects:
        technologies = ', '.join(project.technologies)
        print(f"{project.date or '----------'}  {project.title}  [{technologies}]")


def show_post(folio: Folio, slug: str) -> int:
    page = folio.build_post_page(slug)
    if page is None:
        external = next(
            (post for post in folio.list_blog_posts() if post.is_external and post.slug == slug), None
        )
        if external is not None:
            print(external.external_url)
            return 0
        print(f"Post not found: {slug}", file=sys.stderr)
        return 1
    print(page['content_html'], end='')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Folio - portfolio and blog content pipeline')
    parser.add_argument('--blog-dir', type=str,
                        help='Directory containing Markdown blog posts')
    parser.add_argument('--external-links', type=str,
                        help='Catalog file of externally hosted posts')
    parser.add_argument('--projects-file', type=str,
                        help='Project catalog file')
    parser.add_argument('--log-dir', type=str,
                        help='Directory for log files')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file and starter content')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command')

    posts_parser = subparsers.add_parser('posts', help='List blog posts, most recent first')
    posts_parser.add_argument('--json', action='store_true', help='Print as JSON')

    projects_parser = subparsers.add_parser('projects', help='List projects')
    projects_parser.add_argument('--json', action='store_true', help='Print as JSON')

    show_parser = subparsers.add_parser('show', help='Render a single blog post to HTML')
    show_parser.add_argument('slug', help='Post slug (file name without .md)')

    export_parser = subparsers.add_parser('export', help='Export collections as JSON')
    export_parser.add_argument('--output', type=str, help='Output directory')

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init:
        settings_loader = FolioSettings()
        config_path = settings_loader.create_sample_config(args.init)
        print(f"Created sample configuration file: {config_path}")
        create_starter_structure()
        return

    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings_loader = FolioSettings()
    settings_loader.load_settings()

    # Command line arguments take precedence
    args_dict = {k: v for k, v in vars(args).items() if v is not None}
    final_settings = settings_loader.merge_with_args(args_dict)

    try:
        folio = Folio(
            blog_dir=final_settings['blog_dir'],
            external_links=final_settings['external_links'],
            projects_file=final_settings['projects_file'],
            log_dir=final_settings['log_dir'],
        )

        if args.command == 'posts':
            print_posts(folio, args.json)
        elif args.command == 'projects':
            print_projects(folio, args.json)
        elif args.command == 'show':
            exit_code = show_post(folio, args.slug)
            if exit_code:
                sys.exit(exit_code)
        elif args.command == 'export':
            output_dir = os.path.expanduser(final_settings['output'])
            folio.export(output_dir)
    except (IOError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
