"""Seed a user row so tasks have an owner to reference.

Usage: python add_user.py [username]
"""
import sys

from app.database import create_tables, get_session
from app.models import User


def add_user(username: str):
    """Return (user, created); an existing user is left untouched."""
    with get_session() as db:
        existing_user = db.query(User).filter(User.username == username).first()
        if existing_user:
            return existing_user, False
        user = User(username=username)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user, True


if __name__ == "__main__":
    username = sys.argv[1] if len(sys.argv) > 1 else "demo"

    # Create tables if not exist
    create_tables()

    user, created = add_user(username)
    if created:
        print(f"User created: {username} (id={user.id})")
    else:
        print(f"User already exists: {username} (id={user.id})")
