import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload
from shop_admin.models.category import Category
from shop_admin.extensions import db
from shop_admin.exceptions import ValidationError, NotFound, Conflict, DeleteBlocked
from shop_admin.services.slug_service import SlugService

logger = logging.getLogger(__name__)


class CategoryService:
    """Category hierarchy and the rules protecting it"""

    @staticmethod
    def get_all() -> list:
        return (
            Category.query.options(joinedload(Category.parent))
            .order_by(Category.id)
            .all()
        )

    @staticmethod
    def get_main() -> list:
        return Category.query.filter(Category.parent_id.is_(None)).order_by(Category.id).all()

    @staticmethod
    def get_children(parent_slug: str) -> list:
        parent = CategoryService.get_by_slug(parent_slug)
        return Category.query.filter_by(parent_id=parent.id).order_by(Category.id).all()

    @staticmethod
    def get_by_id(category_id: int) -> Category:
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFound("Category not found")
        return category

    @staticmethod
    def get_by_slug(slug: str) -> Category:
        category = Category.query.filter_by(slug=slug).first()
        if not category:
            raise NotFound("Category not found")
        return category

    @staticmethod
    def list_slugs() -> list:
        return [slug for (slug,) in db.session.query(Category.slug).order_by(Category.id)]

    @staticmethod
    def create(name: str, slug: str = None, parent_id: int = None) -> Category:
        name = CategoryService._clean_name(name)
        parent = CategoryService._resolve_parent(parent_id)
        slug = SlugService.resolve(name, slug)

        category = Category(name=name, slug=slug, parent=parent)
        db.session.add(category)
        CategoryService._commit(category)

        logger.info(f"Created category {category.id} ({category.slug})")
        return category

    @staticmethod
    def update(category_id: int, name: str, slug: str = None, parent_id: int = None) -> Category:
        category = CategoryService.get_by_id(category_id)
        name = CategoryService._clean_name(name)

        if parent_id is not None and parent_id == category.id:
            raise ValidationError(
                "A category cannot be its own parent.",
                errors={"parent_id": ["A category cannot be its own parent."]},
            )
        parent = CategoryService._resolve_parent(parent_id)
        CategoryService._check_cycle(category, parent)

        if slug is None or not slug.strip():
            # renaming keeps the published slug
            slug = category.slug
        elif slug.strip() != category.slug:
            slug = SlugService.resolve(name, slug, exclude_id=category.id)
        else:
            slug = category.slug

        category.name = name
        category.slug = slug
        category.parent = parent
        CategoryService._commit(category)

        logger.info(f"Updated category {category.id} ({category.slug})")
        return category

    @staticmethod
    def delete(category_id: int):
        category = CategoryService.get_by_id(category_id)

        products_count = category.products.count()
        if products_count > 0:
            logger.warning(
                f"Refusing to delete category {category.id}: {products_count} products"
            )
            raise DeleteBlocked(
                "Cannot delete category with associated products",
                products_count=products_count,
            )

        children_count = category.children.count()
        if children_count > 0:
            logger.warning(
                f"Refusing to delete category {category.id}: {children_count} subcategories"
            )
            raise DeleteBlocked(
                "Cannot delete category with subcategories",
                children_count=children_count,
            )

        category.delete()
        logger.info(f"Deleted category {category_id}")

    @staticmethod
    def _clean_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError(
                "The name field is required.",
                errors={"name": ["The name field is required."]},
            )
        return name

    @staticmethod
    def _resolve_parent(parent_id: int):
        if parent_id is None:
            return None
        parent = db.session.get(Category, parent_id)
        if not parent:
            raise NotFound("Parent category not found")
        return parent

    @staticmethod
    def _check_cycle(category: Category, parent: Category):
        """Reject a parent whose ancestor chain leads back to ``category``"""
        seen = set()
        ancestor = parent
        while ancestor is not None and ancestor.id not in seen:
            if ancestor.id == category.id:
                raise ValidationError(
                    "A category cannot be moved under one of its own subcategories.",
                    errors={"parent_id": ["This parent would create a cycle."]},
                )
            seen.add(ancestor.id)
            ancestor = ancestor.parent

    @staticmethod
    def _commit(category: Category):
        slug = category.slug
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Integrity error saving category {slug}: {e.orig}")
            raise Conflict("Category conflicts with an existing record", slug=slug) from e
