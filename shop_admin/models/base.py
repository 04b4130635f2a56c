from shop_admin.extensions import db
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum


def utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    """Base model with common fields and methods"""

    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def delete(self):
        """Delete instance from database"""
        db.session.delete(self)
        db.session.commit()

    def to_dict(self):
        """Convert model to dictionary"""
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, datetime):
                result[column.name] = value.isoformat()
            elif isinstance(value, Decimal):
                result[column.name] = float(value)
            elif isinstance(value, Enum):
                result[column.name] = value.value
            else:
                result[column.name] = value
        return result


def enum_values(enum_class):
    """Persist enum values ("pending") rather than member names ("PENDING")"""
    return [member.value for member in enum_class]
