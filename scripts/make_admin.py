"""Promote an existing account to admin, or create one.

Usage: python scripts/make_admin.py EMAIL [PASSWORD]
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bighits import create_app
from bighits.extensions import db
from bighits.models import User


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 1

    email = argv[1].strip().lower()
    app = create_app()
    with app.app_context():
        user = User.query.filter_by(email=email).first()

        if not user:
            if len(argv) < 3:
                print(f"No account for {email}; pass a password to create one")
                return 1
            user = User(name=email.split('@')[0], email=email, role='admin')
            user.set_password(argv[2])
            db.session.add(user)
            print("New admin user created")
        else:
            user.role = 'admin'
            print("Existing user promoted to admin")

        db.session.commit()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
