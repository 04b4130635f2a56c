import re
from slugify import slugify as python_slugify

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
SLUG_MAX_LENGTH = 255


def slugify(text: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Generate URL-friendly slug"""
    return python_slugify(
        text or "", lowercase=True, separator="-", max_length=max_length
    )


def is_valid_slug(value: str) -> bool:
    return bool(value) and SLUG_PATTERN.match(value) is not None
