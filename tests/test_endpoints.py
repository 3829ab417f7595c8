import re
from urllib.parse import urlsplit

import pytest

from bighits.core import DataSourceError, Session, SQLAlchemyDataSource
from bighits.extensions import db
from bighits.models import Blog, Product, Tutor


def sign_in(client, email, password):
    return client.post('/auth/signin', data={'email': email, 'password': password})


def sort_href(body, field):
    match = re.search(r'href="(/admin/[^"]*sort=%s[^"]*)"' % field, body)
    assert match, f'no sort link for {field}'
    return match.group(1).replace('&amp;', '&')


def location_path(response):
    return urlsplit(response.headers['Location']).path


# -----------------------------------------------------------------------------
# Access guard
# -----------------------------------------------------------------------------

@pytest.mark.parametrize('url', ['/admin/', '/admin/blogs', '/admin/products/new', '/admin/tutors/edit/1'])
def test_unauthenticated_redirects_to_signin(client, url):
    r = client.get(url)
    assert r.status_code == 302
    assert location_path(r) == '/auth/signin'


def test_non_admin_redirects_home(user_client):
    r = user_client.get('/admin/blogs')
    assert r.status_code == 302
    assert location_path(r) == '/'


def test_non_admin_cannot_mutate(app, user_client):
    r = user_client.post('/admin/blogs/1/delete', data={'confirm': 'yes'})
    assert location_path(r) == '/'
    with app.app_context():
        assert db.session.get(Blog, 1) is not None


def test_loading_session_renders_placeholder(app, client):
    class StillLoading:
        def current(self):
            return Session.loading()

    app.extensions['session_provider'] = StillLoading()
    r = client.get('/admin/blogs')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Loading' in body
    assert 'id="blogs-1"' not in body


def test_admin_sees_dashboard(admin_client):
    r = admin_client.get('/admin/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Admin Dashboard' in body
    assert '6 total, 5 published' in body


def test_signin_rejects_bad_password(client):
    r = sign_in(client, 'admin@bighits.com', 'wrong')
    assert r.status_code == 200
    assert 'Invalid email or password.' in r.get_data(as_text=True)
    assert client.get('/admin/').status_code == 302


@pytest.mark.parametrize('target, expected', [
    ('/admin/products', '/admin/products'),
    ('//evil.example', '/admin/'),
    ('/\\evil.example', '/admin/'),
    ('https://evil.example/admin', '/admin/'),
    ('admin/products', '/admin/'),
])
def test_signin_only_follows_local_next(client, target, expected):
    r = client.post('/auth/signin', query_string={'next': target},
                    data={'email': 'admin@bighits.com', 'password': 'admin123'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith(expected)
    assert 'evil.example' not in r.headers['Location']


def test_signout_drops_admin_access(admin_client):
    assert admin_client.get('/admin/').status_code == 200
    admin_client.get('/auth/signout')
    r = admin_client.get('/admin/')
    assert location_path(r) == '/auth/signin'


def test_unknown_resource_is_404(admin_client):
    assert admin_client.get('/admin/widgets').status_code == 404


# -----------------------------------------------------------------------------
# Lists
# -----------------------------------------------------------------------------

def test_blog_list_search(admin_client):
    r = admin_client.get('/admin/blogs?q=seo')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'id="blogs-5"' in body
    assert 'id="blogs-1"' not in body


def test_product_list_sorted_by_price(admin_client):
    body = admin_client.get('/admin/products?sort=price&dir=asc').get_data(as_text=True)
    order = [body.index(f'id="products-{i}"') for i in (4, 1, 3, 6, 2, 5)]
    assert order == sorted(order)


def test_sort_links_flip_the_active_field(admin_client):
    body = admin_client.get('/admin/products?sort=price&dir=asc').get_data(as_text=True)
    assert 'dir=desc' in sort_href(body, 'price')
    assert 'dir=asc' in sort_href(body, 'stock')


def test_list_shows_banner_when_loading_fails(app, admin_client):
    class Broken(SQLAlchemyDataSource):
        def fetch_all(self):
            raise DataSourceError('Blog store is offline')

    app.extensions['data_sources']['blogs'] = Broken(Blog, db, label='Blog Post')
    r = admin_client.get('/admin/blogs')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Blog store is offline' in body
    assert 'Could not load blog posts.' in body


# -----------------------------------------------------------------------------
# Toggle and delete
# -----------------------------------------------------------------------------

def test_toggle_published(app, admin_client):
    r = admin_client.post('/admin/blogs/5/toggle', data={'q': 'seo'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/blogs?q=seo')
    with app.app_context():
        assert db.session.get(Blog, 5).published is True


def test_rejected_toggle_leaves_record_unchanged(app, admin_client):
    class ReadOnly(SQLAlchemyDataSource):
        def update_published(self, record_id, value):
            raise DataSourceError('Tutors are read-only right now')

    app.extensions['data_sources']['tutors'] = ReadOnly(Tutor, db, label='Tutor')
    r = admin_client.post('/admin/tutors/1/toggle', follow_redirects=True)
    body = r.get_data(as_text=True)
    assert 'Tutors are read-only right now' in body
    with app.app_context():
        assert db.session.get(Tutor, 1).published is True


def test_delete_confirmation_page(admin_client):
    r = admin_client.get('/admin/products/2/delete')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Are you sure you want to delete this product?' in body
    assert 'SEO Starter Package' in body


def test_delete_cancelled(app, admin_client):
    r = admin_client.post('/admin/products/2/delete', data={'confirm': 'no'}, follow_redirects=True)
    assert 'Deletion cancelled.' in r.get_data(as_text=True)
    with app.app_context():
        assert db.session.get(Product, 2) is not None


def test_delete_confirmed(app, admin_client):
    r = admin_client.post('/admin/products/2/delete', data={'confirm': 'yes'}, follow_redirects=True)
    body = r.get_data(as_text=True)
    assert 'id="products-2"' not in body
    with app.app_context():
        assert db.session.get(Product, 2) is None


def test_rejected_delete_keeps_record_and_shows_error(app, admin_client):
    class Undeletable(SQLAlchemyDataSource):
        def delete(self, record_id):
            raise DataSourceError('Delete failed: record is locked')

    app.extensions['data_sources']['blogs'] = Undeletable(Blog, db, label='Blog Post')
    r = admin_client.post('/admin/blogs/3/delete', data={'confirm': 'yes'}, follow_redirects=True)
    body = r.get_data(as_text=True)
    assert 'Delete failed: record is locked' in body
    assert 'id="blogs-3"' in body


def test_delete_unknown_record_is_404(admin_client):
    assert admin_client.get('/admin/blogs/99/delete').status_code == 404


# -----------------------------------------------------------------------------
# Forms
# -----------------------------------------------------------------------------

def test_new_product_validation_error(app, admin_client):
    r = admin_client.post('/admin/products/new', data={
        'name': '', 'description': 'x', 'price': '10', 'category': 'Courses', 'stock': '1',
    })
    assert r.status_code == 200
    assert 'Please fill in all required fields' in r.get_data(as_text=True)
    with app.app_context():
        assert Product.query.count() == 6


def test_new_product_created(app, admin_client):
    r = admin_client.post('/admin/products/new', data={
        'name': 'Brand Strategy Workshop', 'description': 'Half-day workshop',
        'price': '250', 'category': 'Courses', 'stock': '12', 'published': '1',
    })
    assert r.status_code == 302
    assert location_path(r) == '/admin/products'
    with app.app_context():
        product = Product.query.filter_by(slug='brand-strategy-workshop').one()
        assert product.price == 250.0
        assert product.stock == 12
        assert product.published is True


def test_new_tutor_form_renders(admin_client):
    r = admin_client.get('/admin/tutors/new')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Add New Tutor' in body
    assert 'name="calendly_link"' in body


def test_edit_blog(app, admin_client):
    r = admin_client.get('/admin/blogs/edit/2')
    assert r.status_code == 200
    assert '10 Digital Marketing Strategies That Work' in r.get_data(as_text=True)

    r = admin_client.post('/admin/blogs/edit/2', data={
        'title': '12 Digital Marketing Strategies',
        'slug': 'digital-marketing-strategies-that-work',
        'excerpt': 'Updated', 'content': 'Updated body', 'category': 'Marketing',
        'published': '1',
    })
    assert r.status_code == 302
    with app.app_context():
        blog = db.session.get(Blog, 2)
        assert blog.title == '12 Digital Marketing Strategies'
        assert blog.slug == '12-digital-marketing-strategies'


def test_edit_missing_record_is_404(admin_client):
    r = admin_client.get('/admin/blogs/edit/404')
    assert r.status_code == 404
    assert 'Failed to load blog post' in r.get_data(as_text=True)


# -----------------------------------------------------------------------------
# Public pages
# -----------------------------------------------------------------------------

def test_public_pages_show_only_published(client):
    body = client.get('/blog').get_data(as_text=True)
    assert 'Building a Personal Brand Online' in body
    assert 'How to Optimize Your Website for SEO' not in body

    assert client.get('/blog/how-to-optimize-website-seo').status_code == 404
    assert client.get('/blog/building-personal-brand-online').status_code == 200

    shop = client.get('/shop', query_string={'category': 'Design Services'}).get_data(as_text=True)
    assert 'Professional Business Card Design' in shop
    assert 'Logo Design Premium Package' not in shop

    tutors = client.get('/tutoring').get_data(as_text=True)
    assert 'Olivia Brown' in tutors
    assert 'James Wilson' not in tutors


def test_home_page(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'How to Start a Successful Online Business' in r.get_data(as_text=True)
