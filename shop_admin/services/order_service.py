import logging
from shop_admin.models.order import Order
from shop_admin.models.base import utcnow
from shop_admin.extensions import db
from shop_admin.enums import OrderStatus, PaymentStatus
from shop_admin.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class OrderService:

    @staticmethod
    def list_orders(status: str = None, limit: int = 10, skip: int = 0):
        """Newest orders first, optionally narrowed to one status"""
        query = Order.query

        if status:
            try:
                query = query.filter(Order.status == OrderStatus(status))
            except ValueError:
                raise ValidationError(
                    "Invalid order status", errors={"status": [f"Unknown status {status}"]}
                )

        total = query.count()
        orders = (
            query.order_by(Order.created_at.desc(), Order.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return orders, total

    @staticmethod
    def get_order_by_id(order_id: int) -> Order:
        order = db.session.get(Order, order_id)
        if not order:
            raise NotFound("Order not found")
        return order

    @staticmethod
    def update_order(order_id: int, **changes) -> Order:
        """Apply status, payment status and notes changes.

        Shipping and delivery timestamps are set the first time the order
        reaches that status and are kept afterwards.
        """
        order = OrderService.get_order_by_id(order_id)

        if "status" in changes:
            order.status = OrderStatus(changes["status"])
            if order.status == OrderStatus.SHIPPED and not order.shipped_at:
                order.shipped_at = utcnow()
            if order.status == OrderStatus.DELIVERED and not order.delivered_at:
                order.delivered_at = utcnow()

        if "payment_status" in changes:
            order.payment_status = PaymentStatus(changes["payment_status"])

        if "notes" in changes:
            order.notes = changes["notes"]

        db.session.commit()
        logger.info(f"Updated order {order.order_number}: {order.status.value}")
        return order

    @staticmethod
    def delete_order(order_id: int):
        order = OrderService.get_order_by_id(order_id)
        order_number = order.order_number
        order.delete()
        logger.info(f"Deleted order {order_number}")
