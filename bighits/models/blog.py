"""
Blog Post Model
"""

from datetime import date, datetime

from bighits.extensions import db


class Blog(db.Model):
    """Blog post shown on /blog once published"""
    __tablename__ = 'blogs'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    excerpt = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(100), default='Admin User')
    category = db.Column(db.String(60), nullable=False)
    tags = db.Column(db.String(255), default='')
    cover_image = db.Column(db.String(255), default='')
    date = db.Column(db.Date, default=date.today)
    published = db.Column(db.Boolean, default=False, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_record(self):
        """Plain dict consumed by the admin list controller and forms."""
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'excerpt': self.excerpt,
            'content': self.content,
            'author': self.author or '',
            'category': self.category,
            'tags': self.tags or '',
            'cover_image': self.cover_image or '',
            'date': self.date.isoformat() if self.date else '',
            'published': bool(self.published),
        }

    def __repr__(self):
        return f'<Blog {self.slug}>'
