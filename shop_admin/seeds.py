"""Demo catalogue loaded by ``flask seed-categories``."""
import logging
from shop_admin.extensions import db
from shop_admin.models.category import Category

logger = logging.getLogger(__name__)

CATEGORY_TREE = [
    ("Electronics", "electronics", [
        ("Smartphones", "smartphones"),
        ("Laptops", "laptops"),
        ("Tablets", "tablets"),
        ("Headphones", "headphones"),
        ("Cameras", "cameras"),
        ("Smart Watches", "smart-watches"),
    ]),
    ("Clothing", "clothing", [
        ("Men's Clothing", "mens-clothing"),
        ("Women's Clothing", "womens-clothing"),
        ("Kids' Clothing", "kids-clothing"),
        ("Shoes", "shoes"),
        ("Accessories", "accessories"),
    ]),
    ("Books", "books", [
        ("Fiction", "fiction"),
        ("Non-Fiction", "non-fiction"),
        ("Educational", "educational"),
        ("Comics & Graphic Novels", "comics-graphic-novels"),
    ]),
    ("Home & Garden", "home-garden", [
        ("Furniture", "furniture"),
        ("Kitchen & Dining", "kitchen-dining"),
        ("Home Decor", "home-decor"),
        ("Garden Tools", "garden-tools"),
        ("Bedding", "bedding"),
    ]),
    ("Sports & Outdoors", "sports-outdoors", [
        ("Fitness Equipment", "fitness-equipment"),
        ("Outdoor Recreation", "outdoor-recreation"),
        ("Team Sports", "team-sports"),
    ]),
    ("Beauty & Personal Care", "beauty-personal-care", []),
    ("Toys & Games", "toys-games", []),
    ("Automotive", "automotive", []),
]


def _get_or_create(name, slug, parent=None):
    category = Category.query.filter_by(slug=slug).first()
    if category:
        return category, False
    category = Category(name=name, slug=slug, parent=parent)
    db.session.add(category)
    db.session.flush()
    return category, True


def seed_categories(tree=CATEGORY_TREE) -> int:
    """Insert the category tree, skipping slugs that already exist"""
    created = 0
    for name, slug, children in tree:
        parent, is_new = _get_or_create(name, slug)
        created += is_new
        for child_name, child_slug in children:
            _, is_new = _get_or_create(child_name, child_slug, parent)
            created += is_new
    db.session.commit()
    logger.info(f"Seeded {created} categories")
    return created
