"""A small book catalogue exposed as list and table models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


@dataclass
class Book:
    """A book with its title, author, year of publication and rating."""

    title: str
    author: str
    year: int
    rating: float


class BookListRole(IntEnum):
    """Roles of the list model, one per book field."""

    TITLE = 257
    AUTHOR = 258
    YEAR = 259
    RATING = 260


class BookColumn(IntEnum):
    """Columns of the table model, one per book field."""

    TITLE = 0
    AUTHOR = 1
    YEAR = 2
    RATING = 3


class Orientation(IntEnum):
    HORIZONTAL = 1
    VERTICAL = 2


_LIST_ROLE_NAMES = {
    BookListRole.TITLE: "title",
    BookListRole.AUTHOR: "author",
    BookListRole.YEAR: "year",
    BookListRole.RATING: "rating",
}

_FIELD_BY_ROLE = {
    BookListRole.TITLE: "title",
    BookListRole.AUTHOR: "author",
    BookListRole.YEAR: "year",
    BookListRole.RATING: "rating",
}

_FIELD_BY_COLUMN = {
    BookColumn.TITLE: "title",
    BookColumn.AUTHOR: "author",
    BookColumn.YEAR: "year",
    BookColumn.RATING: "rating",
}

_HEADERS = {
    BookColumn.TITLE: "Book",
    BookColumn.AUTHOR: "Author",
    BookColumn.YEAR: "Year",
    BookColumn.RATING: "Rating",
}


class BookListModel:
    """Books as rows, their fields as roles."""

    def __init__(self, books: Iterable[Book]) -> None:
        self.books = list(books)

    def row_count(self) -> int:
        return len(self.books)

    def data(self, row: int, role: int) -> str | int | float | None:
        """Return a field of the book at a row, or None for a bad row or role."""
        if not 0 <= row < len(self.books):
            return None
        field = _FIELD_BY_ROLE.get(role)
        if field is None:
            return None
        return getattr(self.books[row], field)

    def role_names(self) -> dict[int, str]:
        return dict(_LIST_ROLE_NAMES)


class BookTableModel:
    """Books as rows, their fields as four columns."""

    def __init__(self, books: Iterable[Book]) -> None:
        self.books = list(books)

    def row_count(self) -> int:
        return len(self.books)

    def column_count(self) -> int:
        return len(BookColumn)

    def data(self, row: int, column: int) -> str | int | float | None:
        """Return the display value of a cell, or None outside the table."""
        if not 0 <= row < len(self.books):
            return None
        field = _FIELD_BY_COLUMN.get(column)
        if field is None:
            return None
        return getattr(self.books[row], field)

    def header_data(self, section: int, orientation: int) -> str | None:
        """Return the title of a horizontal header section, or None."""
        if orientation != Orientation.HORIZONTAL:
            return None
        return _HEADERS.get(section)


def sample_books() -> list[Book]:
    """Return the catalogue shown by the table view example."""
    return [
        Book("Harry Potter and the Philosopher's Stone", "J.K. Rowling", 1997, 4.5),
        Book("Fantastic Beasts and Where to Find Them", "J.K. Rowling", 2001, 4.3),
        Book("The Dark Tower", "Stephen King", 1982, 4.0),
        Book("American Gods", "Neil Gaiman", 2001, 4.1),
        Book("The Hobbit", "J.R.R. Tolkien", 1937, 4.4),
        Book("1984", "George Orwell", 1949, 4.3),
        Book("To Kill a Mockingbird", "Harper Lee", 1960, 4.5),
        Book("The Great Gatsby", "F. Scott Fitzgerald", 1925, 3.9),
        Book("Moby Dick", "Herman Melville", 1851, 3.6),
        Book("War and Peace", "Leo Tolstoy", 1867, 4.3),
        Book("Pride and Prejudice", "Jane Austen", 1813, 4.1),
        Book("The Catcher in the Rye", "J.D. Salinger", 1951, 3.9),
        Book("Ulysses", "James Joyce", 1922, 3.7),
        Book("One Hundred Years of Solitude", "Gabriel Garcia Marquez", 1967, 4.4),
    ]


def sorted_by_year(books: Iterable[Book]) -> list[Book]:
    """Return the books in ascending year order, keeping ties in their order."""
    return sorted(books, key=lambda book: book.year)