"""Slug derivation for blog titles, product and tutor names."""

import re

_DISALLOWED = re.compile(r'[^a-z0-9\s]')
_WHITESPACE = re.compile(r'\s+')
SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


def slugify(value):
    """Turn a human readable title into a URL-safe slug.

    >>> slugify('How to Build!')
    'how-to-build'
    """
    if value is None:
        return ''
    text = _DISALLOWED.sub('', str(value).lower()).strip()
    return _WHITESPACE.sub('-', text)


def is_valid_slug(value):
    return bool(value) and SLUG_PATTERN.match(value) is not None
