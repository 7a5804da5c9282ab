"""
Request helpers shared by the API blueprints.
"""

import math

from flask import request

from donation_tracker.errors import ValidationError


def request_data():
    """Return the request body as a dict, from JSON or url-encoded form data."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def optional_text(data, field):
    """Return a stripped string for ``field``, or None when it was not supplied."""
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'Field "{field}" must be a non-empty string.', field=field)
    return value.strip()


def parse_number(value, field):
    """Parse a finite float from JSON numbers or numeric strings."""
    if isinstance(value, bool):
        raise ValidationError(f'Field "{field}" must be a number.', field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f'Field "{field}" must be a number.', field=field)
    if not math.isfinite(number):
        raise ValidationError(f'Field "{field}" must be a finite number.', field=field)
    return number
