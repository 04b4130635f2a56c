import pytest
from decimal import Decimal
from flask_jwt_extended import create_access_token
from shop_admin import create_app, db
from shop_admin.config import TestingConfig
from shop_admin.enums import UserRole
from shop_admin.models.user import User
from shop_admin.models.category import Category
from shop_admin.models.product import Product
from shop_admin.models.order import Order, OrderItem


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# User fixtures
@pytest.fixture
def admin_user(app):
    """Create an admin user"""
    user = User(
        email="admin@test.com",
        username="admin",
        first_name="Test",
        last_name="Admin",
        role=UserRole.ADMIN,
        is_active=True,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def staff_user(app):
    """Create a user without admin rights"""
    user = User(
        email="staff@test.com",
        username="staff",
        role=UserRole.STAFF,
        is_active=True,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


# Auth token fixtures
@pytest.fixture
def admin_token(client, admin_user):
    """Get admin authentication token"""
    response = client.post(
        "/api/auth/login", json={"username": "admin", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["access_token"]


@pytest.fixture
def admin_headers(admin_token):
    """Admin authentication headers"""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def staff_headers(app, staff_user):
    """Staff cannot log in to the dashboard, so mint the token directly"""
    token = create_access_token(identity=str(staff_user.id))
    return {"Authorization": f"Bearer {token}"}


# Data fixtures
@pytest.fixture
def electronics(app):
    """Create a main category"""
    category = Category(name="Electronics", slug="electronics")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def phones(app, electronics):
    """Create a subcategory of Electronics"""
    category = Category(name="Phones", slug="phones", parent_id=electronics.id)
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(app, phones):
    """Create a test product"""
    product = Product(
        category_id=phones.id,
        title="iPhone 15 Pro Max",
        description="Latest iPhone",
        price=Decimal("1199.00"),
        discount_percentage=Decimal("5.00"),
        rating=Decimal("4.7"),
        stock=10,
        brand="Apple",
        thumbnail="https://example.com/iphone.jpg",
        images=["https://example.com/iphone-1.jpg"],
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def order(app, product):
    """Create a pending order with one line"""
    order = Order(
        order_number="ORD-1001",
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        customer_phone="0901234567",
        shipping_address="123 Test St",
        subtotal=Decimal("2398.00"),
        total=Decimal("2398.00"),
        payment_method="credit_card",
    )
    db.session.add(order)
    db.session.flush()

    item = OrderItem(
        order_id=order.id,
        product_id=product.id,
        product_title=product.title,
        product_price=product.price,
        quantity=2,
        subtotal=Decimal("2398.00"),
    )
    db.session.add(item)
    db.session.commit()
    return order
