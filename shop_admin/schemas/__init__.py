from marshmallow import Schema, fields, validate, EXCLUDE
from shop_admin.enums import OrderStatus, PaymentStatus


class BaseSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class LoginSchema(BaseSchema):
    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


class CategorySchema(BaseSchema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    slug = fields.Str(allow_none=True, validate=validate.Length(max=255))
    parent_id = fields.Int(allow_none=True)


class ProductSchema(BaseSchema):
    title = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(allow_none=True)
    price = fields.Decimal(required=True, places=2, validate=validate.Range(min=0))
    discount_percentage = fields.Decimal(
        allow_none=True, places=2, validate=validate.Range(min=0, max=100)
    )
    rating = fields.Decimal(allow_none=True, places=1, validate=validate.Range(min=0, max=5))
    stock = fields.Int(allow_none=True, validate=validate.Range(min=0))
    brand = fields.Str(allow_none=True, validate=validate.Length(max=255))
    category = fields.Str(required=True, validate=validate.Length(min=1))
    thumbnail = fields.Str(allow_none=True, validate=validate.Length(max=500))
    images = fields.List(fields.Str(), allow_none=True)


class OrderUpdateSchema(BaseSchema):
    status = fields.Str(validate=validate.OneOf([s.value for s in OrderStatus]))
    payment_status = fields.Str(
        validate=validate.OneOf([s.value for s in PaymentStatus])
    )
    notes = fields.Str(allow_none=True)
