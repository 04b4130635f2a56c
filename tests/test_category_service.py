import re
import pytest
from shop_admin.extensions import db
from shop_admin.exceptions import ValidationError, NotFound, Conflict, DeleteBlocked
from shop_admin.models.category import Category
from shop_admin.models.product import Product
from shop_admin.services.category_service import CategoryService
from shop_admin.services.slug_service import SlugService


class TestCategoryQueries:
    """Read side of the category store"""

    def test_get_all_includes_parent(self, app, electronics, phones):
        categories = CategoryService.get_all()

        assert [c.slug for c in categories] == ["electronics", "phones"]
        assert categories[1].to_list_item()["parent_slug"] == "electronics"

    def test_get_main(self, app, electronics, phones):
        main = CategoryService.get_main()

        assert [c.slug for c in main] == ["electronics"]

    def test_get_children(self, app, electronics, phones):
        children = CategoryService.get_children("electronics")

        assert [c.name for c in children] == ["Phones"]
        assert CategoryService.get_children("phones") == []

    def test_get_children_unknown_parent(self, app):
        with pytest.raises(NotFound):
            CategoryService.get_children("missing")

    def test_get_by_id_not_found(self, app):
        with pytest.raises(NotFound, match="Category not found"):
            CategoryService.get_by_id(999)

    def test_list_slugs(self, app, electronics, phones):
        assert CategoryService.list_slugs() == ["electronics", "phones"]


class TestCreateCategory:
    """CategoryService.create"""

    def test_create_main_category(self, app):
        category = CategoryService.create("Electronics")

        assert category.id is not None
        assert category.slug == "electronics"
        assert category.parent_id is None
        assert category.to_list_item()["parent_slug"] is None

    def test_duplicate_names_get_suffixes(self, app):
        first = CategoryService.create("Electronics")
        second = CategoryService.create("Electronics")
        third = CategoryService.create("Electronics")

        assert [first.slug, second.slug, third.slug] == [
            "electronics",
            "electronics-1",
            "electronics-2",
        ]

    def test_long_names_keep_slugs_within_column(self, app):
        first = CategoryService.create("a" * 255)
        second = CategoryService.create("a" * 255)
        expanded = CategoryService.create("ß" * 200)

        assert first.slug == "a" * 255
        assert second.slug == "a" * 253 + "-1"
        assert all(len(c.slug) <= 255 for c in (first, second, expanded))

    def test_create_subcategory(self, app, electronics):
        category = CategoryService.create("Phones", parent_id=electronics.id)

        assert category.parent_id == electronics.id
        assert category.to_list_item()["parent_slug"] == "electronics"

    def test_create_with_unknown_parent(self, app):
        with pytest.raises(NotFound, match="Parent category not found"):
            CategoryService.create("Phones", parent_id=42)

        assert Category.query.count() == 0

    def test_create_with_explicit_slug(self, app):
        category = CategoryService.create("Electronics", slug="gadgets")

        assert category.slug == "gadgets"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_create_requires_name(self, app, name):
        with pytest.raises(ValidationError, match="name field is required"):
            CategoryService.create(name)

    def test_name_is_trimmed(self, app):
        category = CategoryService.create("  Books  ")

        assert category.name == "Books"
        assert category.slug == "books"

    def test_racing_duplicate_slug_surfaces_conflict(self, app, electronics, monkeypatch):
        # Simulate a writer that checked before another request inserted the slug
        monkeypatch.setattr(
            SlugService, "unique_slug", staticmethod(lambda base_slug, exclude_id=None: base_slug)
        )

        with pytest.raises(Conflict) as exc_info:
            CategoryService.create("Electronics")

        assert exc_info.value.status_code == 409
        assert Category.query.filter_by(slug="electronics").count() == 1


class TestUpdateCategory:
    """CategoryService.update"""

    def test_rename_keeps_slug(self, app, electronics):
        category = CategoryService.update(electronics.id, name="Consumer Electronics")

        assert category.name == "Consumer Electronics"
        assert category.slug == "electronics"

    def test_resubmitting_current_slug_is_not_suffixed(self, app, electronics):
        second = CategoryService.create("Electronics")
        assert second.slug == "electronics-1"

        category = CategoryService.update(second.id, name="Electronics 2", slug="electronics-1")

        assert category.slug == "electronics-1"

    def test_change_slug(self, app, electronics):
        category = CategoryService.update(electronics.id, name="Electronics", slug="gadgets")

        assert category.slug == "gadgets"

    def test_change_slug_to_taken_one(self, app, electronics, phones):
        with pytest.raises(ValidationError, match="already been taken"):
            CategoryService.update(phones.id, name="Phones", slug="electronics")

        assert db.session.get(Category, phones.id).slug == "phones"

    def test_move_under_parent(self, app, electronics):
        books = CategoryService.create("Books")

        category = CategoryService.update(books.id, name="Books", parent_id=electronics.id)

        assert category.parent_id == electronics.id

    def test_omitted_parent_makes_main_category(self, app, phones):
        category = CategoryService.update(phones.id, name="Phones")

        assert category.parent_id is None

    def test_self_parent_rejected(self, app, electronics):
        with pytest.raises(ValidationError, match="own parent"):
            CategoryService.update(electronics.id, name="Renamed", parent_id=electronics.id)

        category = db.session.get(Category, electronics.id)
        assert category.name == "Electronics"
        assert category.parent_id is None

    def test_cycle_rejected(self, app, electronics, phones):
        android = CategoryService.create("Android", parent_id=phones.id)

        with pytest.raises(ValidationError, match="own subcategories"):
            CategoryService.update(electronics.id, name="Electronics", parent_id=android.id)

        assert db.session.get(Category, electronics.id).parent_id is None

    def test_update_unknown_category(self, app):
        with pytest.raises(NotFound):
            CategoryService.update(404, name="Nothing")

    def test_update_unknown_parent(self, app, electronics):
        with pytest.raises(NotFound):
            CategoryService.update(electronics.id, name="Electronics", parent_id=404)


class TestDeleteCategory:
    """CategoryService.delete"""

    def test_delete_leaf(self, app, electronics):
        CategoryService.delete(electronics.id)

        assert db.session.get(Category, electronics.id) is None

    def test_delete_blocked_by_products(self, app, product, phones):
        db.session.add(
            Product(category_id=phones.id, title="Pixel 9", price=799, stock=3)
        )
        db.session.commit()

        with pytest.raises(DeleteBlocked) as exc_info:
            CategoryService.delete(phones.id)

        assert exc_info.value.status_code == 422
        assert exc_info.value.payload == {"products_count": 2}
        assert db.session.get(Category, phones.id) is not None

    def test_delete_blocked_by_children(self, app, electronics, phones):
        with pytest.raises(DeleteBlocked) as exc_info:
            CategoryService.delete(electronics.id)

        assert exc_info.value.to_dict() == {
            "message": "Cannot delete category with subcategories",
            "children_count": 1,
        }
        assert db.session.get(Category, electronics.id) is not None

    def test_delete_missing(self, app):
        with pytest.raises(NotFound):
            CategoryService.delete(12345)


class TestScenario:
    """Electronics walkthrough from the admin dashboard"""

    def test_walkthrough(self, app):
        electronics = CategoryService.create("Electronics")
        assert electronics.to_list_item() == {
            "id": electronics.id,
            "name": "Electronics",
            "slug": "electronics",
            "parent_id": None,
            "parent_slug": None,
        }

        duplicate = CategoryService.create("Electronics")
        assert duplicate.slug == "electronics-1"

        CategoryService.create("Phones", parent_id=electronics.id)
        children = CategoryService.get_children("electronics")
        assert [c.name for c in children] == ["Phones"]

        with pytest.raises(DeleteBlocked) as exc_info:
            CategoryService.delete(electronics.id)
        assert exc_info.value.payload["children_count"] == 1
        assert re.match(r"^[a-z0-9]+(-[a-z0-9]+)*$", duplicate.slug)
