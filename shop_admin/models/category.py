from shop_admin.models.base import BaseModel
from shop_admin.extensions import db


class Category(BaseModel):
    """Category model

    ``parent_id`` points back into the same table. A null parent marks a main
    category; children are looked up by ``parent_id`` rather than walked as
    objects.
    """
    __tablename__ = 'categories'

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    parent_id = db.Column(
        db.Integer,
        db.ForeignKey('categories.id'),
        nullable=True,
        index=True,
    )

    # Relationships
    parent = db.relationship('Category', remote_side='Category.id', back_populates='children')
    children = db.relationship(
        'Category', back_populates='parent', lazy='dynamic', passive_deletes='all'
    )
    products = db.relationship(
        'Product', back_populates='category', lazy='dynamic', passive_deletes='all'
    )

    def to_summary(self):
        return {'id': self.id, 'name': self.name, 'slug': self.slug}

    def to_list_item(self):
        """Shape used by listings and write responses"""
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'parent_id': self.parent_id,
            'parent_slug': self.parent.slug if self.parent else None,
        }

    def to_detail(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'parent_id': self.parent_id,
            'parent': self.parent.to_summary() if self.parent else None,
            'children': [
                child.to_summary() for child in self.children.order_by(Category.id)
            ],
            'products_count': self.products.count(),
        }

    def __repr__(self):
        return f'<Category id={self.id} slug={self.slug}>'
