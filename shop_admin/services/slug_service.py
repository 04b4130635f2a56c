from shop_admin.models.category import Category
from shop_admin.exceptions import ValidationError
from shop_admin.utils.helpers import slugify, is_valid_slug, SLUG_MAX_LENGTH


class SlugService:
    """Pick URL slugs for categories.

    The unique index on ``categories.slug`` is the real guarantee; these
    checks only choose a candidate that is free at the time of the request.
    """

    @staticmethod
    def slug_taken(slug: str, exclude_id: int = None) -> bool:
        query = Category.query.filter(Category.slug == slug)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        return query.first() is not None

    @staticmethod
    def unique_slug(base_slug: str, exclude_id: int = None) -> str:
        """Return ``base_slug`` or the first free ``base_slug-N``

        The base is cut short where needed so the suffixed slug still fits
        the column.
        """
        slug = base_slug
        counter = 1
        while SlugService.slug_taken(slug, exclude_id):
            suffix = f"-{counter}"
            base = base_slug[:SLUG_MAX_LENGTH - len(suffix)].rstrip("-")
            slug = f"{base}{suffix}"
            counter += 1
        return slug

    @staticmethod
    def resolve(name: str, slug: str = None, exclude_id: int = None) -> str:
        """Slug for a category being saved.

        An explicit slug is kept verbatim and must be well formed and unused.
        Without one the slug is derived from ``name`` and suffixed until free.
        """
        if slug is not None and slug.strip():
            slug = slug.strip()
            if not is_valid_slug(slug):
                raise ValidationError(
                    "The slug may only contain lowercase letters, digits and single hyphens.",
                    errors={"slug": ["Invalid slug format."]},
                )
            if SlugService.slug_taken(slug, exclude_id):
                raise ValidationError(
                    "The slug has already been taken.",
                    errors={"slug": ["The slug has already been taken."]},
                )
            return slug

        candidate = slugify(name)
        if not candidate:
            raise ValidationError(
                "The name must contain at least one letter or digit.",
                errors={"name": ["Cannot derive a slug from this name."]},
            )
        return SlugService.unique_slug(candidate, exclude_id)
