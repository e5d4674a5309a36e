import math
import re

from .errors import MalformedRecordError, SampleReadError

SEPARATOR = ', '

# Longest numeric prefix accepted by the legacy reader: optional whitespace and sign,
# digits with single underscores between them, optional fraction and exponent.
_LEADING_FLOAT = re.compile(
    r'\s*([+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+(?:_\d+)*)?)'
)


def parse_leading_float(token):
    """Convert the leading numeric part of token, 0.0 when there is none.

    Missing tokens (None) also count as 0.0, so a record without a second
    field degrades instead of failing.
    """
    if token is None:
        return 0.0
    match = _LEADING_FLOAT.match(token)
    if not match:
        return 0.0
    return float(match.group(1).replace('_', ''))


def parse_strict_float(token, filepath, field):
    try:
        value = float(token.strip())
    except ValueError:
        raise MalformedRecordError(filepath, f"{field} value {token.strip()!r} is not a number") from None
    if not math.isfinite(value):
        raise MalformedRecordError(filepath, f"{field} value {token.strip()!r} is not finite")
    return value


def parse_sample_text(content, filepath='<string>', permissive=False):
    """Parse '<time>, <cars>' into a record dict with 'time' and 'cars' keys"""
    parts = content.split(SEPARATOR)

    if permissive:
        time = parse_leading_float(parts[0] if len(parts) > 0 else None)
        cars = parse_leading_float(parts[1] if len(parts) > 1 else None)
        return {'time': time, 'cars': cars}

    if len(parts) < 2:
        raise MalformedRecordError(
            filepath, f"expected two values separated by {SEPARATOR!r}, got {content.strip()!r}")

    time = parse_strict_float(parts[0], filepath, 'time')
    cars = parse_strict_float(parts[1], filepath, 'cars')
    return {'time': time, 'cars': cars}


def parse_sample_file(filepath, permissive=False):
    # Undecodable bytes only survive in permissive mode, where they parse as 0.0
    errors = 'replace' if permissive else 'strict'
    try:
        with open(filepath, 'r', encoding='utf-8', errors=errors) as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise SampleReadError(filepath, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise SampleReadError(filepath, e.strerror or str(e)) from e

    return parse_sample_text(content, filepath, permissive=permissive)
