from shop_admin.models.base import BaseModel
from shop_admin.extensions import db


class Product(BaseModel):
    __tablename__ = "products"

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    title = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    discount_percentage = db.Column(db.Numeric(5, 2), default=0)
    rating = db.Column(db.Numeric(2, 1), default=0)
    stock = db.Column(db.Integer, default=0, nullable=False)
    brand = db.Column(db.String(255))
    thumbnail = db.Column(db.String(500))
    images = db.Column(db.JSON, default=list)

    # Relationships
    category = db.relationship("Category", back_populates="products")
    order_items = db.relationship("OrderItem", back_populates="product")

    def to_dict(self):
        data = super().to_dict()
        data["images"] = list(self.images or [])
        # the dashboard filters products by category slug
        data["category"] = self.category.slug if self.category else None
        return data
