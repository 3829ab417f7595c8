"""
Default Data

The admin account and the starter catalog created on first start.
"""

import logging
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError

from bighits.extensions import db

logger = logging.getLogger(__name__)

DEFAULT_BLOGS = [
    {
        'id': 1,
        'title': 'How to Start a Successful Online Business',
        'excerpt': 'Learn the essential steps to launch and grow your online business in '
                   "today's digital marketplace.",
        'author': 'John Doe',
        'category': 'Business',
        'date': '2023-03-15',
        'published': True,
        'slug': 'how-to-start-successful-online-business',
    },
    {
        'id': 2,
        'title': '10 Digital Marketing Strategies That Work',
        'excerpt': 'Discover proven marketing tactics that will help your business stand out '
                   'in a crowded online space.',
        'author': 'Jane Smith',
        'category': 'Marketing',
        'date': '2023-03-10',
        'published': True,
        'slug': 'digital-marketing-strategies-that-work',
    },
    {
        'id': 3,
        'title': 'The Future of E-commerce: Trends to Watch',
        'excerpt': 'Stay ahead of the curve with these emerging e-commerce trends that are '
                   'shaping the future of online retail.',
        'author': 'Mike Johnson',
        'category': 'E-commerce',
        'date': '2023-03-05',
        'published': True,
        'slug': 'future-of-ecommerce-trends',
    },
    {
        'id': 4,
        'title': 'Ultimate Guide to Social Media Marketing',
        'excerpt': 'Learn how to leverage social media platforms to grow your brand and '
                   'connect with your audience.',
        'author': 'Sarah Williams',
        'category': 'Marketing',
        'date': '2023-02-28',
        'published': True,
        'slug': 'ultimate-guide-social-media-marketing',
    },
    {
        'id': 5,
        'title': 'How to Optimize Your Website for SEO',
        'excerpt': "Improve your website's visibility in search engines with these proven "
                   'SEO techniques.',
        'author': 'David Chen',
        'category': 'SEO',
        'date': '2023-02-20',
        'published': False,
        'slug': 'how-to-optimize-website-seo',
    },
    {
        'id': 6,
        'title': 'Building a Personal Brand Online',
        'excerpt': 'Discover strategies to create a strong personal brand that sets you '
                   'apart in your industry.',
        'author': 'Emma Thompson',
        'category': 'Personal Development',
        'date': '2023-02-15',
        'published': True,
        'slug': 'building-personal-brand-online',
    },
]

DEFAULT_PRODUCTS = [
    {'id': 1, 'name': 'Professional Business Card Design', 'price': 49.99,
     'category': 'Design Services', 'stock': 999, 'published': True,
     'created_at': '2023-06-10T08:30:00', 'slug': 'professional-business-card-design'},
    {'id': 2, 'name': 'SEO Starter Package', 'price': 199.99,
     'category': 'Digital Marketing', 'stock': 50, 'published': True,
     'created_at': '2023-06-15T10:15:00', 'slug': 'seo-starter-package'},
    {'id': 3, 'name': 'E-commerce Website Template', 'price': 79.99,
     'category': 'Web Templates', 'stock': 200, 'published': True,
     'created_at': '2023-06-18T14:00:00', 'slug': 'ecommerce-website-template'},
    {'id': 4, 'name': 'Social Media Marketing Guide (E-book)', 'price': 19.99,
     'category': 'E-books', 'stock': 5000, 'published': True,
     'created_at': '2023-06-20T09:45:00', 'slug': 'social-media-marketing-guide'},
    {'id': 5, 'name': 'Logo Design Premium Package', 'price': 299.99,
     'category': 'Design Services', 'stock': 100, 'published': False,
     'created_at': '2023-06-22T11:30:00', 'slug': 'logo-design-premium-package'},
    {'id': 6, 'name': 'Email Marketing Automation Course', 'price': 149.99,
     'category': 'Courses', 'stock': 75, 'published': True,
     'created_at': '2023-06-25T13:20:00', 'slug': 'email-marketing-automation-course'},
]

DEFAULT_TUTORS = [
    {'id': 1, 'name': 'John Smith', 'expertise': 'Digital Marketing, SEO', 'rate': 75,
     'rating': 4.8, 'availability': 'Mon, Wed, Fri', 'published': True,
     'created_at': '2023-06-10T08:30:00', 'slug': 'john-smith'},
    {'id': 2, 'name': 'Emma Johnson', 'expertise': 'Web Development, JavaScript', 'rate': 85,
     'rating': 4.9, 'availability': 'Tue, Thu, Sat', 'published': True,
     'created_at': '2023-06-15T10:15:00', 'slug': 'emma-johnson'},
    {'id': 3, 'name': 'Michael Williams', 'expertise': 'Business Strategy, Entrepreneurship',
     'rate': 95, 'rating': 4.7, 'availability': 'Mon, Tue, Wed, Thu, Fri', 'published': True,
     'created_at': '2023-06-18T14:00:00', 'slug': 'michael-williams'},
    {'id': 4, 'name': 'Sophia Garcia', 'expertise': 'Content Marketing, Social Media', 'rate': 70,
     'rating': 4.6, 'availability': 'Wed, Thu, Fri, Sat', 'published': True,
     'created_at': '2023-06-20T09:45:00', 'slug': 'sophia-garcia'},
    {'id': 5, 'name': 'James Wilson', 'expertise': 'E-commerce, Shopify', 'rate': 80,
     'rating': 4.5, 'availability': 'Mon, Wed, Fri, Sat', 'published': False,
     'created_at': '2023-06-22T11:30:00', 'slug': 'james-wilson'},
    {'id': 6, 'name': 'Olivia Brown', 'expertise': 'Product Management, UX Design', 'rate': 90,
     'rating': 4.9, 'availability': 'Tue, Thu, Sat, Sun', 'published': True,
     'created_at': '2023-06-25T13:20:00', 'slug': 'olivia-brown'},
]


def ensure_admin_user(app):
    """Make sure the configured admin account exists and has the admin role."""
    from bighits.models import User

    email = app.config['ADMIN_EMAIL']
    admin = User.query.filter_by(email=email).first()
    if admin is None:
        admin = User(name='Admin User', email=email, role='admin')
        admin.set_password(app.config['ADMIN_PASSWORD'])
        db.session.add(admin)
        logger.info('Created admin account %s', email)
    elif admin.role != 'admin':
        admin.role = 'admin'
        logger.info('Promoted %s to admin', email)
    db.session.commit()


def _blog(data):
    from bighits.models import Blog

    return Blog(
        title=data['title'],
        slug=data['slug'],
        excerpt=data['excerpt'],
        content=data.get('content') or data['excerpt'],
        author=data['author'],
        category=data['category'],
        date=date.fromisoformat(data['date']),
        published=data['published'],
    )


def _product(data):
    from bighits.models import Product

    return Product(
        name=data['name'],
        slug=data['slug'],
        description=data.get('description') or data['name'],
        price=data['price'],
        category=data['category'],
        stock=data['stock'],
        published=data['published'],
        created_at=datetime.fromisoformat(data['created_at']),
    )


def _tutor(data):
    from bighits.models import Tutor

    return Tutor(
        name=data['name'],
        slug=data['slug'],
        bio=data.get('bio') or f"{data['name']} teaches {data['expertise']}.",
        expertise=data['expertise'],
        rate=data['rate'],
        rating=data['rating'],
        availability=data['availability'],
        published=data['published'],
        created_at=datetime.fromisoformat(data['created_at']),
    )


def ensure_default_catalog():
    """Seed blogs, products and tutors into empty tables."""
    from bighits.models import Blog, Product, Tutor

    for model, fixtures, build in (
        (Blog, DEFAULT_BLOGS, _blog),
        (Product, DEFAULT_PRODUCTS, _product),
        (Tutor, DEFAULT_TUTORS, _tutor),
    ):
        if model.query.first() is not None:
            continue
        try:
            db.session.add_all([build(data) for data in fixtures])
            db.session.commit()
            logger.info('Seeded %d %s rows', len(fixtures), model.__tablename__)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error('Could not seed %s: %s', model.__tablename__, e)
