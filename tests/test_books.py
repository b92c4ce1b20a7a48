"""
Tests for Book Catalog Endpoints

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_get_book_by_isbn_success, test_get_book_by_isbn_not_found
"""

from fastapi import status
from sqlalchemy.exc import OperationalError

from bookshop.dependencies import get_book_catalog
from bookshop.models import Book, Review


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_empty(self, client):
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, catalog_books):
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 5
        assert data[0] == {
            "id": catalog_books[0].id,
            "isbn": "978-3-16-148410-0",
            "title": "Example Book 1",
            "author": "Author 1",
            "reviews": [],
        }

    def test_list_books_includes_review_ids(self, client, sample_review: Review):
        response = client.get("/books")

        assert response.json()[0]["reviews"] == [sample_review.id]


class TestSearchBooks:
    """Tests for GET /books/search endpoint."""

    def test_search_without_params_returns_catalog(self, client, catalog_books):
        search = client.get("/books/search")
        everything = client.get("/books")

        assert search.status_code == status.HTTP_200_OK
        assert search.json() == everything.json()

    def test_search_by_isbn(self, client, catalog_books):
        response = client.get("/books/search", params={"isbn": "978-3-16-148411-7"})

        assert [b["title"] for b in response.json()] == ["Example Book 2"]

    def test_search_by_author_partial(self, client, catalog_books):
        response = client.get("/books/search", params={"author": "AUTHOR 5"})

        assert [b["isbn"] for b in response.json()] == ["978-3-16-148414-8"]

    def test_search_combined_filters(self, client, catalog_books):
        response = client.get(
            "/books/search", params={"title": "example", "author": "3"}
        )

        assert [b["title"] for b in response.json()] == ["Example Book 3"]

    def test_search_no_match(self, client, catalog_books):
        response = client.get("/books/search", params={"title": "Dune"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestBooksByTitle:
    """Tests for GET /books/title/{title} endpoint."""

    def test_title_case_insensitive(self, client, sample_book: Book):
        response = client.get("/books/title/EXAMPLE")

        assert response.status_code == status.HTTP_200_OK
        assert [b["title"] for b in response.json()] == ["Example Book 1"]

    def test_title_with_spaces(self, client, catalog_books):
        response = client.get("/books/title/book 4")

        assert [b["title"] for b in response.json()] == ["Example Book 4"]


class TestBooksByAuthor:
    """Tests for GET /books/author/{author} endpoint."""

    def test_author_exact(self, client, catalog_books):
        response = client.get("/books/author/Author 2")

        assert response.status_code == status.HTTP_200_OK
        assert [b["isbn"] for b in response.json()] == ["978-3-16-148411-7"]

    def test_author_partial_does_not_match(self, client, catalog_books):
        response = client.get("/books/author/Author")

        assert response.json() == []


class TestBookByIsbn:
    """Tests for GET /books/isbn/{isbn} endpoint."""

    def test_get_book_by_isbn_success(self, client, sample_book: Book):
        response = client.get(f"/books/isbn/{sample_book.isbn}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book.id
        assert data["title"] == "Example Book 1"

    def test_get_book_by_isbn_not_found(self, client):
        response = client.get("/books/isbn/0000000000")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Book not found"}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["review_auth_required"] is False


class TestDatabaseErrors:
    def test_store_failure_is_500(self, client):
        class FailingCatalog:
            def list_all(self):
                raise OperationalError("SELECT books", {}, Exception("disk I/O error"))

        client.app.dependency_overrides[get_book_catalog] = FailingCatalog

        response = client.get("/books")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"message": "A database error occurred"}
