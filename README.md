# coursebook

Tools for building a course book with mdbook, together with the worked
solutions to the course's exercises.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## mdbook tools

### `mdbook-course` — preprocessor

Reads the `[context, book]` JSON pair that mdbook sends on standard input,
handles front matter at the top of each chapter, and writes the book back as
JSON on standard output. Front matter is the text between two `---` lines at
the very start of a chapter.

* With the `html` renderer the front matter is kept, shown in a
  `<pre class="frontmatter">` block ahead of the chapter text.
* With any other renderer the front matter is stripped.

Chapters without front matter are left as they are. If the input is not a
valid `[context, book]` pair, the error is printed to standard error and the
command exits with status 1.

mdbook asks whether a renderer is supported with:

```
mdbook-course supports html
```

which always succeeds. Register it in `book.toml`:

```toml
[preprocessor.course]
command = "mdbook-course"
```

From Python, `coursebook.frontmatter.split_frontmatter(text)` returns
`(frontmatter, content)` or `None`, and
`coursebook.frontmatter.remove_frontmatter(context, book)` changes a book dict
in place. `coursebook.book.iter_chapters(book)` yields every chapter of a book,
each parent before its sub-chapters.

### `mdbook-exerciser` — renderer

Extracts exercise starter files from the book. In a chapter, an HTML comment of
the form

```markdown
<!-- File src/main.rs -->
```

followed by a code block writes that block's contents to `src/main.rs` under a
directory named after the chapter file's stem. A comment stays pending until the
next code block; code blocks with no comment before them are ignored.

The output directory comes from `book.toml`:

```toml
[output.exerciser]
output-directory = "exercises"
```

The output directory is removed and recreated on every run. Missing or
malformed configuration is reported on standard error with exit status 1.

From Python:

```python
from pathlib import Path
from coursebook.exerciser import process

written = process(Path("out"), "<!-- File hello.txt -->\n\n```\nhi\n```\n")
# [PosixPath('out/hello.txt')]
```

`coursebook.exerciser_cli.process_all(book, output_directory)` does the same for
every chapter of a book that has a path, and returns all paths written.

## Exercise solutions

| Command | What it does |
| --- | --- |
| `coursebook-transpose` | prints an example 3×3 matrix and its transpose |
| `coursebook-luhn` | checks the example number `1234 5678 1234 5670` with the Luhn algorithm |
| `coursebook-library` | builds a small book library and reports the oldest book |
| `coursebook-greeting [NAME]` | prints a greeting (to `Bob` by default) wrapped at 24 columns |

`coursebook.luhn.main(["4263 9826 4026 9299"])` checks the numbers it is given
instead of the example one.

The same code is available as a library:

```python
from coursebook.luhn import luhn
from coursebook.matrix import transpose, pretty_print
from coursebook.shapes import Point, Polygon, Circle, perimeter
from coursebook.library import Book, Library
from coursebook.greetings import greeting
from coursebook.birthday import BirthdayService
from coursebook.analyze import analyze_numbers
from coursebook.virtio import RequestType, VirtioBlockRequest

luhn(" 0 0 ")                               # True
transpose([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
perimeter(Circle(Point(10, 20), 5))         # 31.41...
Point(16, 16) + Point(-4, 3)                # Point(x=12, y=19)

library = Library()
library.add_book(Book("Lord of the Rings", 1954))
library.oldest_book()

greeting("Bob")
BirthdayService().wish_happy_birthday("Bob", 42)
analyze_numbers(10, 20)                     # prints and returns "x (10) is smallest!"

header = VirtioBlockRequest(request_type=RequestType.FLUSH, sector=42).as_bytes()
VirtioBlockRequest.from_bytes(header)
```

## What this package does not do

* `BirthdayService` only composes the birthday message; it does not register
  itself as a service or answer calls from other processes.
* `VirtioBlockRequest` only encodes and decodes the 16-byte request header; it
  does not talk to any block device.