#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with sample data for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

Books go through the same validation and BookService path as
POST /books, then the whole catalog is printed unpaged.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from book_catalog.config import get_settings
from book_catalog.database import SessionLocal, create_tables
from book_catalog.errors import Ok
from book_catalog.models import Book
from book_catalog.repositories import BookRepository
from book_catalog.schemas import BookCreate
from book_catalog.services.books import BookService
from book_catalog.validation import validate_book

BOOKS_DATA = [
    {"title": "1984", "author": "George Orwell", "year": 1949,
     "description": "A dystopian novel about surveillance."},
    {"title": "Animal Farm", "author": "George Orwell", "year": 1945,
     "description": "An allegory of the Russian Revolution."},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "year": 1813,
     "description": "Elizabeth Bennet and Mr. Darcy."},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "year": 1952},
    {"title": "Murder on the Orient Express", "author": "Agatha Christie", "year": 1934,
     "description": "Hercule Poirot investigates a murder on a snowbound train."},
    {"title": "Foundation", "author": "Isaac Asimov", "year": 1951,
     "description": "The fall of the Galactic Empire."},
    {"title": "I, Robot", "author": "Isaac Asimov", "year": 1950},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "year": 1937,
     "description": "Bilbo Baggins and the Lonely Mountain."},
    {"title": "Dune", "author": "Frank Herbert", "year": 1965,
     "description": "Desert planet, spice and politics."},
    {"title": "Dune Messiah", "author": "Frank Herbert", "year": 1969},
    {"title": "Children of Dune", "author": "Frank Herbert", "year": 1976},
    {"title": "Emma", "author": "Jane Austen", "year": 1815},
]


def clear_data(db: Session) -> None:
    """Clear all existing books."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(service: BookService) -> int:
    """Create sample books, skipping any entry that fails validation."""
    print("Creating books...")
    created = 0
    for data in BOOKS_DATA:
        payload = BookCreate(**data)
        errors = validate_book(payload)
        if errors:
            print(f"  Skipping {data.get('title')!r}: {[e.message for e in errors]}")
            continue
        service.create(payload)
        created += 1

    print(f"Created {created} books.")
    return created


def print_catalog(service: BookService) -> None:
    result = service.list_all()
    if isinstance(result, Ok):
        for book in result.value:
            print(f"  [{book.id:>3}] {book.title} - {book.author} ({book.year})")


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        service = BookService(BookRepository(db))
        created = create_books(service)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nBooks created: {created}")
        print_catalog(service)
        print(f"\nAPI: http://localhost:{settings.port}{settings.api_prefix}/books")
        print(f"Docs: http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
