import logging
from shop_admin.models.user import User
from shop_admin.extensions import db
from shop_admin.enums import UserRole
from shop_admin.exceptions import AuthenticationError, NotFound, ValidationError
from flask_jwt_extended import create_access_token, create_refresh_token

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def create_admin(email: str, username: str, password: str, **kwargs) -> User:
        if User.query.filter_by(email=email).first():
            raise ValidationError("Email already exists")

        if User.query.filter_by(username=username).first():
            raise ValidationError("Username already exists")

        user = User(
            email=email,
            username=username,
            role=UserRole.ADMIN,
            is_active=True,
            first_name=kwargs.get("first_name"),
            last_name=kwargs.get("last_name"),
            gender=kwargs.get("gender"),
            image=kwargs.get("image"),
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()

        logger.info(f"Created admin {user.username}")
        return user

    @staticmethod
    def login_admin(username: str, password: str) -> dict:
        """Authenticate an admin and generate tokens"""
        user = User.query.filter_by(username=username, role=UserRole.ADMIN).first()

        if not user or not user.check_password(password):
            logger.info(f"Rejected login for {username}")
            raise AuthenticationError("The provided credentials are incorrect.")

        if not user.is_active:
            raise AuthenticationError("Account is deactivated")

        identity = str(user.id)
        return {
            "access_token": create_access_token(identity=identity),
            "refresh_token": create_refresh_token(identity=identity),
            "user": user.to_dict(),
        }

    @staticmethod
    def get_user_by_id(user_id) -> User:
        user = db.session.get(User, int(user_id))
        if not user:
            raise NotFound("User not found")
        return user
