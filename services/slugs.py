import re
from itertools import count
from models import db, LeaderProfile

# Base used when a name has no ASCII letters or digits left after normalising
FALLBACK_SLUG = 'leader'


def slugify(name):
    """Lowercase, keep [a-z0-9-], hyphenate whitespace runs, trim hyphens"""
    slug = name.lower()
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip('-')


def base_slug(name):
    return slugify(name or '') or FALLBACK_SLUG


def candidate_slugs(base):
    """base, base-1, base-2, ..."""
    yield base
    for n in count(1):
        yield f'{base}-{n}'


def slug_exists(slug):
    return db.session.query(LeaderProfile.id).filter_by(slug=slug).first() is not None


def allocate_slug(name, exclude=()):
    """
    Return the first candidate slug for `name` not held by any leader profile.

    Existence is checked against live rows, so a slug freed by a deleted
    profile is handed out again. `exclude` lists candidates already known to
    be taken (e.g. lost to a concurrent insert).
    """
    for candidate in candidate_slugs(base_slug(name)):
        if candidate in exclude:
            continue
        if not slug_exists(candidate):
            return candidate
