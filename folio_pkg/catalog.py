"""
Readers for structured catalog files (external links, projects).

Catalogs are JSON by default; ``.yml``/``.yaml`` files are read as YAML.
"""

import json
import os

import yaml

from .exceptions import MalformedRecord, MissingStore


def load_catalog(catalog_path):
    """
    Load an ordered list of records from a catalog file.

    Args:
        catalog_path: Path to the JSON or YAML catalog

    Returns:
        List of records as loaded (entries are not validated here)

    Raises:
        MissingStore: If the file does not exist
        MalformedRecord: If the file cannot be parsed or is not a list
    """
    if not catalog_path or not os.path.isfile(catalog_path):
        raise MissingStore(catalog_path)

    file_ext = os.path.splitext(catalog_path)[1].lower()
    with open(catalog_path, 'r', encoding='utf-8') as f:
        try:
            if file_ext in ['.yml', '.yaml']:
                records = yaml.safe_load(f)
            else:
                records = json.load(f)
        except yaml.YAMLError as e:
            raise MalformedRecord(f"invalid YAML catalog: {e}", catalog_path) from e
        except json.JSONDecodeError as e:
            raise MalformedRecord(f"invalid JSON catalog: {e}", catalog_path) from e
        except UnicodeDecodeError as e:
            raise MalformedRecord(f"catalog is not valid UTF-8: {e}", catalog_path) from e

    if records is None:
        return []
    if not isinstance(records, list):
        raise MalformedRecord(
            f"catalog must be a list of records, got {type(records).__name__}", catalog_path
        )
    return records


def optional_string(record, key, source=None):
    """Return record[key] as a string, None when absent, or raise if ill-typed."""
    value = record.get(key)
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise MalformedRecord(f"'{key}' must be a string", source)
    return value


def required_string(record, key, source=None):
    """Return record[key], raising MalformedRecord if it is missing or not a string."""
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise MalformedRecord(f"missing or invalid '{key}'", source)
    return value
