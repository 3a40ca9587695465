from datetime import datetime, date

DATE_FORMATS = ['%Y-%m-%dT%H:%M:%S', '%Y-%m-%d', '%b %d, %Y', '%Y-%m', '%Y']


def parse_date(date_str):
    """Parse a date string, returning None when no known format matches."""
    if isinstance(date_str, datetime):
        return date_str
    elif isinstance(date_str, date):
        return datetime(date_str.year, date_str.month, date_str.day)
    elif isinstance(date_str, str):
        value = date_str.strip()
        # Trailing timezone designators are not part of the display value
        if value.endswith('Z'):
            value = value[:-1]
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
    return None


def format_date(date_str):
    """Format a date for display, e.g. 'January 5, 2024'."""
    date_obj = parse_date(date_str)
    if date_obj is None:
        return '' if date_str is None else str(date_str)
    return f"{date_obj:%B} {date_obj.day}, {date_obj.year}"


def normalize_date(value):
    """Turn YAML-parsed date values back into ISO-8601 strings."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
