"""
Public Routes
"""

from flask import abort, render_template, request

from bighits.models import Blog, Product, Tutor
from bighits.public import public_bp


def _categories(query, column):
    return sorted({value for (value,) in query.with_entities(column).distinct() if value})


@public_bp.route('/')
def index():
    """Home page with the newest published records of each kind"""
    blogs = Blog.query.filter_by(published=True).order_by(Blog.date.desc()).limit(3).all()
    products = Product.query.filter_by(published=True) \
        .order_by(Product.featured.desc(), Product.created_at.desc()).limit(3).all()
    tutors = Tutor.query.filter_by(published=True) \
        .order_by(Tutor.featured.desc(), Tutor.rating.desc()).limit(3).all()
    return render_template('public/index.html', blogs=blogs, products=products, tutors=tutors)


@public_bp.route('/blog')
def blog_list():
    """Published posts, optionally narrowed to one category"""
    base = Blog.query.filter_by(published=True)
    category = request.args.get('category', '').strip()
    query = base.filter_by(category=category) if category else base
    posts = query.order_by(Blog.date.desc()).all()
    return render_template('public/blog_list.html', posts=posts,
                           categories=_categories(base, Blog.category), category=category)


@public_bp.route('/blog/<slug>')
def blog_post(slug):
    post = Blog.query.filter_by(slug=slug, published=True).first()
    if post is None:
        abort(404)
    return render_template('public/blog_post.html', post=post)


@public_bp.route('/shop')
def shop():
    base = Product.query.filter_by(published=True)
    category = request.args.get('category', '').strip()
    query = base.filter_by(category=category) if category else base
    products = query.order_by(Product.name).all()
    return render_template('public/shop.html', products=products,
                           categories=_categories(base, Product.category), category=category)


@public_bp.route('/tutoring')
def tutoring():
    tutors = Tutor.query.filter_by(published=True).order_by(Tutor.rating.desc(), Tutor.name).all()
    return render_template('public/tutoring.html', tutors=tutors)
