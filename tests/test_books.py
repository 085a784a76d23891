import pytest

from lingmoaddons.books import (
    Book,
    BookColumn,
    BookListModel,
    BookListRole,
    BookTableModel,
    Orientation,
    sample_books,
    sorted_by_year,
)


@pytest.fixture
def books():
    return sample_books()


def test_sample_catalogue_first_book(books):
    assert len(books) == 14
    assert books[0] == Book("Harry Potter and the Philosopher's Stone", "J.K. Rowling", 1997, 4.5)


def test_list_model_row_count_matches_books(books):
    assert BookListModel(books).row_count() == len(books)


@pytest.mark.parametrize(
    "role, field",
    [
        (BookListRole.TITLE, "title"),
        (BookListRole.AUTHOR, "author"),
        (BookListRole.YEAR, "year"),
        (BookListRole.RATING, "rating"),
    ],
)
def test_list_model_data_returns_fields(books, role, field):
    model = BookListModel(books)
    for row, book in enumerate(books):
        assert model.data(row, role) == getattr(book, field)


def test_list_model_bad_row_or_role(books):
    model = BookListModel(books)
    assert model.data(-1, BookListRole.TITLE) is None
    assert model.data(len(books), BookListRole.TITLE) is None
    assert model.data(0, 0) is None


def test_list_model_role_names(books):
    assert BookListModel(books).role_names() == {
        257: "title",
        258: "author",
        259: "year",
        260: "rating",
    }


def test_table_model_dimensions(books):
    model = BookTableModel(books)
    assert model.row_count() == len(books)
    assert model.column_count() == 4


def test_table_model_cells(books):
    model = BookTableModel(books)
    book = books[4]
    assert model.data(4, BookColumn.TITLE) == book.title
    assert model.data(4, BookColumn.AUTHOR) == book.author
    assert model.data(4, BookColumn.YEAR) == book.year
    assert model.data(4, BookColumn.RATING) == book.rating


def test_table_model_outside_table(books):
    model = BookTableModel(books)
    assert model.data(len(books), BookColumn.TITLE) is None
    assert model.data(0, 4) is None


def test_table_headers(books):
    model = BookTableModel(books)
    headers = [model.header_data(c, Orientation.HORIZONTAL) for c in BookColumn]
    assert headers == ["Book", "Author", "Year", "Rating"]
    assert model.header_data(BookColumn.TITLE, Orientation.VERTICAL) is None
    assert model.header_data(4, Orientation.HORIZONTAL) is None


def test_sorted_by_year_is_ascending_permutation(books):
    ordered = sorted_by_year(books)
    years = [b.year for b in ordered]
    assert years == sorted(years)
    assert sorted(b.title for b in ordered) == sorted(b.title for b in books)
    assert ordered[0].title == "Pride and Prejudice"


def test_sorted_by_year_keeps_ties_in_order(books):
    ordered = sorted_by_year(books)
    of_2001 = [b.title for b in ordered if b.year == 2001]
    assert of_2001 == ["Fantastic Beasts and Where to Find Them", "American Gods"]


def test_book_fields_can_change(books):
    model = BookListModel(books)
    books[0].rating = 5.0
    assert model.data(0, BookListRole.RATING) == 5.0