"""
Books Router

Read-only catalog endpoints.

Endpoints:
- GET /books - List every book
- GET /books/search - Filter by isbn, author and/or title
- GET /books/title/{title} - Books whose title contains the text
- GET /books/author/{author} - Books by exactly this author
- GET /books/isbn/{isbn} - One book by ISBN

The fixed paths (/search, /title, /author, /isbn) never collide with
/books/{isbn}/reviews, which lives in the reviews router.
"""

from fastapi import APIRouter, Query

from bookshop.dependencies import Catalog
from bookshop.schemas import BookResponse

router = APIRouter(
    prefix="/books",
    tags=["Books"],
)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="Get every book available in the shop.",
)
def list_books(catalog: Catalog) -> list[BookResponse]:
    return [BookResponse.model_validate(b) for b in catalog.list_all()]


@router.get(
    "/search",
    response_model=list[BookResponse],
    summary="Search books",
    description=(
        "Filter books by exact ISBN and case-insensitive partial author "
        "and title. Filters combine; with none, every book is returned."
    ),
)
def search_books(
    catalog: Catalog,
    isbn: str | None = Query(default=None, description="Exact ISBN"),
    author: str | None = Query(default=None, description="Partial author name"),
    title: str | None = Query(default=None, description="Partial title"),
) -> list[BookResponse]:
    books = catalog.search(isbn=isbn, author=author, title=title)
    return [BookResponse.model_validate(b) for b in books]


@router.get(
    "/title/{title}",
    response_model=list[BookResponse],
    summary="Get books by title",
    description="Books whose title contains the given text, ignoring case.",
)
def get_books_by_title(title: str, catalog: Catalog) -> list[BookResponse]:
    return [BookResponse.model_validate(b) for b in catalog.by_title(title)]


@router.get(
    "/author/{author}",
    response_model=list[BookResponse],
    summary="Get books by author",
    description="Books whose author name matches exactly.",
)
def get_books_by_author(author: str, catalog: Catalog) -> list[BookResponse]:
    return [BookResponse.model_validate(b) for b in catalog.by_author(author)]


@router.get(
    "/isbn/{isbn}",
    response_model=BookResponse,
    summary="Get a book by ISBN",
    responses={404: {"description": "Book not found"}},
)
def get_book_by_isbn(isbn: str, catalog: Catalog) -> BookResponse:
    """
    Get a single book by ISBN.

    Raises:
        NotFoundError: 404 if no book has this ISBN
    """
    return BookResponse.model_validate(catalog.by_isbn(isbn))
