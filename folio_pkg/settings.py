#!/usr/bin/env python3
"""
Configuration for Folio.

Settings come from the first of folio.yml, folio.yaml or folio.json found in
the project directory, layered over DEFAULT_SETTINGS. Command-line options
are layered on top of both by ``merge_with_args``.
"""

import os
import json
import yaml
from typing import Dict, Any, Optional


class FolioSettings:
    """Where Folio finds its content and where it writes exports and logs."""

    DEFAULT_SETTINGS = {
        'blog_dir': 'content/blog',
        'external_links': 'content/blog/external-links.json',
        'projects_file': 'content/projects/projects.json',
        'output': 'output',
        'log_dir': 'logs',
    }

    # Sample config layout: (comment, keys) per section
    SAMPLE_SECTIONS = [
        ('Content sources', ['blog_dir', 'external_links', 'projects_file']),
        ('Export settings', ['output', 'log_dir']),
    ]

    CONFIG_FILES = ['folio.yml', 'folio.yaml', 'folio.json']
    FORMATS = {'yml': 'yaml', 'yaml': 'yaml', 'json': 'json'}

    def __init__(self, config_dir: str = None):
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Apply the project's config file, if any, over the defaults.

        A config file that cannot be read or parsed is reported and ignored,
        leaving the defaults in place.

        Returns:
            Copy of the effective settings
        """
        config_file = self._find_config_file()
        if not config_file:
            return self.settings.copy()

        self.config_file_path = config_file
        try:
            overrides = self._read_config(config_file)
        except (ValueError, IOError, OSError) as e:
            print(f"Warning: Failed to load config file {config_file}: {e}")
            return self.settings.copy()

        if overrides:
            self.settings.update(overrides)
            print(f"Loaded configuration from: {os.path.relpath(config_file)}")
        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        candidates = (os.path.join(self.config_dir, name) for name in self.CONFIG_FILES)
        return next((path for path in candidates if os.path.exists(path)), None)

    def _read_config(self, config_path: str) -> Dict[str, Any]:
        """Parse a folio.* file into a settings mapping."""
        file_format = self.FORMATS.get(os.path.splitext(config_path)[1].lower().lstrip('.'))
        if file_format is None:
            raise ValueError(f"Unsupported config file format: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) if file_format == 'yaml' else json.load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {config_path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping of settings")
        return data

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Write a folio.<file_format> holding the default settings.

        Args:
            file_format: 'yml', 'yaml' or 'json'

        Returns:
            Path of the written file
        """
        if file_format not in self.FORMATS:
            raise ValueError(f"Unsupported config file format: {file_format}")

        config_path = os.path.join(self.config_dir, f'folio.{file_format}')
        with open(config_path, 'w', encoding='utf-8') as f:
            if self.FORMATS[file_format] == 'json':
                json.dump(self.DEFAULT_SETTINGS, f, indent=2)
                f.write('\n')
            else:
                f.write(self._sample_yaml())
        return config_path

    def _sample_yaml(self) -> str:
        parts = ["# Folio configuration\n"]
        for comment, keys in self.SAMPLE_SECTIONS:
            section = {key: self.DEFAULT_SETTINGS[key] for key in keys}
            parts.append(f"\n# {comment}\n")
            parts.append(yaml.safe_dump(section, sort_keys=False, default_flow_style=False))
        return ''.join(parts)

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Settings with every non-None command-line value taking precedence."""
        merged = self.settings.copy()
        merged.update({key: value for key, value in args_dict.items() if value is not None})
        return merged
