import logging
from decimal import Decimal
from sqlalchemy import or_
from shop_admin.models.product import Product
from shop_admin.extensions import db
from shop_admin.exceptions import NotFound
from shop_admin.services.category_service import CategoryService

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = (
    "title",
    "description",
    "price",
    "discount_percentage",
    "rating",
    "stock",
    "brand",
    "thumbnail",
    "images",
)
# columns that keep their value when a null is submitted
NON_NULLABLE_FIELDS = {"title", "price", "stock"}


def _page(query, limit: int, skip: int):
    total = query.count()
    items = query.order_by(Product.id).offset(skip).limit(limit).all()
    return items, total


class ProductService:
    """Product service handling product operations"""

    @staticmethod
    def list_products(limit: int = 10, skip: int = 0):
        return _page(Product.query, limit, skip)

    @staticmethod
    def search_products(search: str = "", limit: int = 10, skip: int = 0):
        """Match ``search`` against title or description"""
        query = Product.query
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(Product.title.ilike(pattern), Product.description.ilike(pattern))
            )
        return _page(query, limit, skip)

    @staticmethod
    def get_products_by_category(category_slug: str, limit: int = 10, skip: int = 0):
        category = CategoryService.get_by_slug(category_slug)
        return _page(Product.query.filter_by(category_id=category.id), limit, skip)

    @staticmethod
    def get_product_by_id(product_id: int) -> Product:
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFound("Product not found")
        return product

    @staticmethod
    def create_product(title: str, price: Decimal, category: str, **kwargs) -> Product:
        """Create product in the category identified by slug"""
        category_model = CategoryService.get_by_slug(category)

        product = Product(title=title, price=price, category=category_model)
        for field in PRODUCT_FIELDS:
            if field in kwargs and kwargs[field] is not None:
                setattr(product, field, kwargs[field])

        db.session.add(product)
        db.session.commit()

        logger.info(f"Created product {product.id} in category {category_model.slug}")
        return product

    @staticmethod
    def update_product(product_id: int, category: str = None, **kwargs) -> Product:
        product = ProductService.get_product_by_id(product_id)

        if category is not None:
            product.category = CategoryService.get_by_slug(category)

        for field in PRODUCT_FIELDS:
            if field not in kwargs:
                continue
            if kwargs[field] is None and field in NON_NULLABLE_FIELDS:
                continue
            setattr(product, field, kwargs[field])

        db.session.commit()
        logger.info(f"Updated product {product.id}")
        return product

    @staticmethod
    def delete_product(product_id: int):
        product = ProductService.get_product_by_id(product_id)
        product.delete()
        logger.info(f"Deleted product {product_id}")
