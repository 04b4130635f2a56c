from shop_admin.models.base import BaseModel, enum_values
from shop_admin.extensions import db
from shop_admin.enums import UserRole
import bcrypt


class User(BaseModel):
    __tablename__ = "users"

    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    username = db.Column(db.String(100), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(UserRole, name="user_roles", values_callable=enum_values), nullable=False
    )
    is_active = db.Column(db.Boolean, default=True)

    # Admin profile
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    gender = db.Column(db.String(20))
    image = db.Column(db.String(500))

    # Relationships
    orders = db.relationship("Order", back_populates="user", lazy="dynamic")

    @property
    def full_name(self):
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) or self.username

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt()
        ).decode("utf-8")

    def check_password(self, password: str) -> bool:
        return bcrypt.checkpw(
            password.encode("utf-8"), self.password_hash.encode("utf-8")
        )

    def has_role(self, *roles) -> bool:
        return self.role in roles

    def to_dict(self, include_sensitive=False):
        data = super().to_dict()
        if not include_sensitive:
            data.pop("password_hash", None)
        return data
