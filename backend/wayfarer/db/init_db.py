"""
Database initialization script.
"""
from wayfarer.db.session import init_db


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
