from coursebook.library import Book, Library, main


def test_library_len():
    library = Library()
    assert len(library) == 0
    assert library.is_empty()

    library.add_book(Book("Lord of the Rings", 1954))
    library.add_book(Book("Alice's Adventures in Wonderland", 1865))
    assert len(library) == 2
    assert not library.is_empty()


def test_library_is_empty():
    library = Library()
    assert library.is_empty()

    library.add_book(Book("Lord of the Rings", 1954))
    assert not library.is_empty()


def test_library_print_books(capsys):
    library = Library()
    library.add_book(Book("Lord of the Rings", 1954))
    library.add_book(Book("Alice's Adventures in Wonderland", 1865))
    library.print_books()
    assert capsys.readouterr().out == (
        "Lord of the Rings, published in 1954\n"
        "Alice's Adventures in Wonderland, published in 1865\n"
    )


def test_library_oldest_book():
    library = Library()
    assert library.oldest_book() is None

    library.add_book(Book("Lord of the Rings", 1954))
    assert library.oldest_book().title == "Lord of the Rings"

    library.add_book(Book("Alice's Adventures in Wonderland", 1865))
    assert library.oldest_book().title == "Alice's Adventures in Wonderland"


def test_oldest_book_tie_keeps_first_added():
    library = Library()
    library.add_book(Book("First", 1900))
    library.add_book(Book("Second", 1900))
    assert library.oldest_book().title == "First"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "The library is empty: library.is_empty() -> true"
    assert lines[1] == "The library is no longer empty: library.is_empty() -> false"
    assert "The oldest book is Alice's Adventures in Wonderland" in lines
    assert "The library has 2 books" in lines