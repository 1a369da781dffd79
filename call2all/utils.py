"""
Utility functions for the call2all SDK
"""

import json
import urllib.parse

# Characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"

def encode(s):
    """Encode URI component"""
    return urllib.parse.quote(to_str(s), safe=URI_COMPONENT_SAFE)

def to_str(value):
    """Coerce a query value to string, spelling booleans the way the API expects"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)

def fill(params):
    """Coerce every entry to a string, sending absent values as empty"""
    return {key: '' if value is None else to_str(value) for key, value in params.items()}

def compact(params):
    """Drop absent entries and coerce the rest to strings"""
    if not params:
        return {}
    return {key: to_str(value) for key, value in params.items() if value is not None}

def qs(form):
    """Convert form dictionary to a form-encoded query string"""
    if not form:
        return ""
    return urllib.parse.urlencode(form)

def build_query(first, form=None):
    """
    Build a query string with fixed leading parameters

    Args:
        first: Ordered (key, value) pairs encoded like encodeURIComponent,
            emitted before anything else
        form: Optional mapping appended after them, form-encoded

    Returns:
        str: Query string without the leading "?"
    """
    parts = [f'{key}={encode(value)}' for key, value in first]
    tail = qs(form)
    if tail:
        parts.append(tail)
    return '&'.join(parts)

def stringify(contents):
    """Pass strings through, serialize anything else as compact JSON"""
    if isinstance(contents, str):
        return contents
    return json.dumps(contents, separators=(',', ':'), ensure_ascii=False)
