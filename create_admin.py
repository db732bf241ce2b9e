import sys
from blogcms import create_app
from blogcms.extensions import db
from blogcms.models.user import User
from blogcms.utils.auth import hash_password

app = create_app()

with app.app_context():
    username = app.config["ADMIN_USERNAME"]
    email = app.config["ADMIN_EMAIL"]
    password = app.config.get("ADMIN_PASSWORD")

    if not password:
        print("ADMIN_PASSWORD is not set")
        sys.exit(1)

    admin_user = User.query.filter((User.username == username) | (User.email == email)).first()
    if not admin_user:
        admin_user = User(
            username=username,
            email=email.lower(),
            password=hash_password(password),
        )
        db.session.add(admin_user)
        db.session.commit()
        print(f"Created admin user {username}")
    else:
        print("Admin user already exists")
