"""
Product Model
"""

from datetime import datetime

from bighits.extensions import db


class Product(db.Model):
    """Shop product"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Float, nullable=False)
    sale_price = db.Column(db.Float)
    category = db.Column(db.String(60), nullable=False)
    stock = db.Column(db.Integer, default=0, nullable=False)
    sku = db.Column(db.String(60), default='')
    images = db.Column(db.Text, default='')  # comma separated URLs
    featured = db.Column(db.Boolean, default=False, nullable=False)
    published = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_record(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'price': self.price,
            'sale_price': self.sale_price,
            'category': self.category,
            'stock': self.stock,
            'sku': self.sku or '',
            'images': self.images or '',
            'featured': bool(self.featured),
            'published': bool(self.published),
            'created_at': self.created_at.isoformat() if self.created_at else '',
        }

    def __repr__(self):
        return f'<Product {self.slug}>'
