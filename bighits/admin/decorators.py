"""
Admin Decorator
"""

from functools import wraps

from flask import current_app, redirect, render_template

from bighits.core.guard import RedirectTo


def admin_required(f):
    """Decorator running the access guard before an admin view.

    - The session snapshot comes from the registered session provider
    - RedirectTo becomes an HTTP redirect (sign-in page or home)
    - A session still loading renders the loading placeholder
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        guard = current_app.extensions['access_guard']
        session = current_app.extensions['session_provider'].current()
        action = guard.evaluate(session)
        if isinstance(action, RedirectTo):
            return redirect(action.path)
        if action.loading:
            return render_template('admin/loading.html')
        return f(*args, **kwargs)
    return wrapper
