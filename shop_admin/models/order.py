from shop_admin.models.base import BaseModel, enum_values
from shop_admin.extensions import db
from shop_admin.enums import OrderStatus, PaymentStatus


class Order(BaseModel):
    __tablename__ = "orders"

    order_number = db.Column(db.String(50), unique=True, nullable=False, index=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    customer_name = db.Column(db.String(255), nullable=False)
    customer_email = db.Column(db.String(255), nullable=False)
    customer_phone = db.Column(db.String(20))
    shipping_address = db.Column(db.Text, nullable=False)
    billing_address = db.Column(db.Text)
    status = db.Column(
        db.Enum(OrderStatus, name="order_statuses", values_callable=enum_values),
        default=OrderStatus.PENDING,
        nullable=False,
    )
    subtotal = db.Column(db.Numeric(10, 2), nullable=False)
    tax = db.Column(db.Numeric(10, 2), default=0)
    shipping_cost = db.Column(db.Numeric(10, 2), default=0)
    discount = db.Column(db.Numeric(10, 2), default=0)
    total = db.Column(db.Numeric(10, 2), nullable=False)
    payment_method = db.Column(db.String(50))
    payment_status = db.Column(
        db.Enum(PaymentStatus, name="payment_statuses", values_callable=enum_values),
        default=PaymentStatus.PENDING,
        nullable=False,
    )
    notes = db.Column(db.Text)
    shipped_at = db.Column(db.DateTime, nullable=True)
    delivered_at = db.Column(db.DateTime, nullable=True)

    # Relationships
    items = db.relationship(
        "OrderItem", back_populates="order", lazy="dynamic", cascade="all, delete-orphan"
    )
    user = db.relationship("User", back_populates="orders")

    def to_dict(self, include_items=False):
        data = super().to_dict()
        if include_items:
            data["items"] = [item.to_dict() for item in self.items.order_by(OrderItem.id)]
        if self.user:
            data["user"] = {
                "id": self.user.id,
                "name": self.user.full_name,
                "email": self.user.email,
            }
        return data


class OrderItem(BaseModel):
    __tablename__ = "order_items"

    order_id = db.Column(
        db.Integer,
        db.ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = db.Column(
        db.Integer,
        db.ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_title = db.Column(db.String(255), nullable=False)
    product_price = db.Column(db.Numeric(10, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    subtotal = db.Column(db.Numeric(10, 2), nullable=False)

    order = db.relationship("Order", back_populates="items")
    product = db.relationship("Product", back_populates="order_items")

    def to_dict(self):
        data = super().to_dict()
        data["product"] = (
            {
                "id": self.product.id,
                "title": self.product.title,
                "thumbnail": self.product.thumbnail,
            }
            if self.product
            else None
        )
        return data
