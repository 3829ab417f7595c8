"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging
from urllib.parse import urlsplit

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_user

from bighits.auth import auth_bp
from bighits.models import User

logger = logging.getLogger(__name__)


def _safe_next(target):
    """Only follow relative redirects after sign-in."""
    if not target:
        return None
    # browsers read '//host' and '/\host' as protocol-relative
    if not target.startswith('/') or target[1:2] in ('/', '\\'):
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return None
    return target


@auth_bp.route('/signin', methods=['GET', 'POST'])
def signin():
    """Email + password sign-in"""
    if current_user.is_authenticated:
        return redirect(url_for('public.index'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password.', 'danger')
            return render_template('auth/signin.html', email=email)

        user = User.query.filter_by(email=email).first()
        if user is None or not user.check_password(password):
            logger.info('Failed sign-in for %s', email)
            flash('Invalid email or password.', 'danger')
            return render_template('auth/signin.html', email=email)

        login_user(user, remember=bool(request.form.get('remember')))
        flash(f'Welcome back, {user.name}!', 'success')

        next_page = _safe_next(request.args.get('next'))
        if next_page:
            return redirect(next_page)
        if user.is_admin:
            return redirect(url_for('admin.dashboard'))
        return redirect(url_for('public.index'))

    return render_template('auth/signin.html', email='')


@auth_bp.route('/signout')
def signout():
    """Sign out and return to the home page"""
    current_app.extensions['session_provider'].sign_out()
    flash('You have been signed out.', 'info')
    return redirect(url_for('public.index'))
