"""
Tutor Model
"""

from datetime import datetime

from bighits.extensions import db


class Tutor(db.Model):
    """Tutor profile listed on the tutoring marketplace"""
    __tablename__ = 'tutors'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    bio = db.Column(db.Text, nullable=False)
    expertise = db.Column(db.String(255), nullable=False)
    rate = db.Column(db.Float, nullable=False)  # hourly, USD
    rating = db.Column(db.Float, default=0.0)
    availability = db.Column(db.String(100), default='')
    calendly_link = db.Column(db.String(255), default='')
    profile_image = db.Column(db.String(255), default='')
    featured = db.Column(db.Boolean, default=False, nullable=False)
    published = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_record(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'bio': self.bio,
            'expertise': self.expertise,
            'rate': self.rate,
            'rating': self.rating if self.rating is not None else 0.0,
            'availability': self.availability or '',
            'calendly_link': self.calendly_link or '',
            'profile_image': self.profile_image or '',
            'featured': bool(self.featured),
            'published': bool(self.published),
            'created_at': self.created_at.isoformat() if self.created_at else '',
        }

    def __repr__(self):
        return f'<Tutor {self.slug}>'
