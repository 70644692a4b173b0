"""A small library of books."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Book:
    """A book with its title and publication year."""

    title: str
    year: int


@dataclass
class Library:
    """An ordered collection of books."""

    books: list[Book] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.books)

    def is_empty(self) -> bool:
        """Return whether the library holds no books."""
        return not self.books

    def add_book(self, book: Book) -> None:
        """Add ``book`` at the end of the library."""
        self.books.append(book)

    def print_books(self) -> None:
        """Print one line per book, in the order they were added."""
        for book in self.books:
            print(f"{book.title}, published in {book.year}")

    def oldest_book(self) -> Book | None:
        """Return the earliest published book, the first one added on a tie."""
        return min(self.books, key=lambda book: book.year, default=None)


def main(argv: Sequence[str] | None = None) -> int:
    """Show the library working on a couple of books."""
    library = Library()
    print(f"The library is empty: library.is_empty() -> {str(library.is_empty()).lower()}")
    library.add_book(Book("Lord of the Rings", 1954))
    library.add_book(Book("Alice's Adventures in Wonderland", 1865))
    print(
        "The library is no longer empty: library.is_empty() -> "
        f"{str(library.is_empty()).lower()}"
    )
    library.print_books()
    oldest = library.oldest_book()
    if oldest is None:
        print("The library is empty!")
    else:
        print(f"The oldest book is {oldest.title}")
    print(f"The library has {len(library)} books")
    library.print_books()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())