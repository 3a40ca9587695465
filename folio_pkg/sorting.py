"""
Ordering for blog and project collections.

Both orderings are comparator-based and run through ``sorted``, which is
stable, so items that compare equal keep their input order.
"""

from functools import cmp_to_key

from .utils import parse_date


def compare_posts(a, b):
    """Most recent first. ISO-8601 date strings compare correctly as text."""
    if a.date < b.date:
        return 1
    if a.date > b.date:
        return -1
    return 0


def compare_projects(a, b):
    """Most recent first when both projects are dated; otherwise leave the pair alone."""
    if not a.date or not b.date:
        return 0

    left = parse_date(a.date)
    right = parse_date(b.date)
    if left is None or right is None:
        return 0

    if left < right:
        return 1
    if left > right:
        return -1
    return 0


def sort_posts(posts):
    return sorted(posts, key=cmp_to_key(compare_posts))


def sort_projects(projects):
    return sorted(projects, key=cmp_to_key(compare_projects))
