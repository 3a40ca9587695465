"""
Project catalog loading.
"""

import logging

from .catalog import load_catalog, optional_string, required_string
from .exceptions import MalformedRecord, MissingStore
from .models import Project
from .sorting import sort_projects
from .utils import normalize_date


class ProjectLoader:
    def __init__(self, projects_path):
        self.projects_path = projects_path
        self.logger = logging.getLogger('Folio.projects')

    def load_all(self):
        """Load the project catalog, most recent dated projects first."""
        try:
            records = load_catalog(self.projects_path)
        except MissingStore as e:
            self.logger.debug(str(e))
            return []
        except MalformedRecord as e:
            self.logger.warning(f"Ignoring project catalog {e}")
            return []

        projects = []
        for index, record in enumerate(records):
            source = f"{self.projects_path}[{index}]"
            try:
                projects.append(self.parse_project(record, source))
            except MalformedRecord as e:
                self.logger.warning(f"Skipping malformed project {e}")

        self.logger.debug(f"Loaded {len(projects)} projects from {self.projects_path}")
        return sort_projects(projects)

    def parse_project(self, record, source=None):
        """Build a Project from a catalog record."""
        if not isinstance(record, dict):
            raise MalformedRecord("record must be an object", source)

        title = required_string(record, 'title', source)
        description = record.get('description', '')
        if not isinstance(description, str):
            raise MalformedRecord("'description' must be a string", source)

        technologies = record.get('technologies') or []
        if not isinstance(technologies, list) or not all(isinstance(t, str) for t in technologies):
            raise MalformedRecord("'technologies' must be a list of strings", source)

        date = normalize_date(record.get('date'))
        if date is not None and not isinstance(date, str):
            raise MalformedRecord("'date' must be a string", source)

        return Project(
            title=title,
            description=description,
            technologies=tuple(technologies),
            github_url=optional_string(record, 'githubUrl', source),
            live_url=optional_string(record, 'liveUrl', source),
            category=optional_string(record, 'category', source),
            date=date or None,
        )
