# authorcompany

A small interactive console program that walks you through applying to
become an author at "Author Company", a fictional book publisher.

The form asks for your name, age and where you live. Applicants under 18
are told they are not eligible, and the session ends there. Otherwise it
asks for the title and page count of your book, its genre, and the result
of a rule check (`Pass` or `Fail`). It then prints your review status,
either the company's success requirements or a few successful authors,
some notes including the starting salary, and the company's book list.

## Installation

```
pip install .
```

## Usage

Run the application form:

```
authorcompany
```

The same command can be started with `python -m authorcompany.cli`.

Several editions of the form are available; choose one with `--edition`:

| Edition       | What differs                                                          |
|---------------|-----------------------------------------------------------------------|
| `last`        | The default. Asks for any genre and repeats it back.                  |
| `second`      | Accepts only the genres Self-Help, Sci-fi and Research; any other ends the session. |
| `code-runner` | Does not ask for a genre.                                             |
| `bookstore`   | Earlier wording; reports eligibility but does not stop for under-18s. |
| `first`       | The earliest wording; prints nothing further if the rule check is `Fail`. |

```
authorcompany --edition second
```

A session of the default edition starts like this:

```
 Welcome to Author Company!
What is your name? Ada
How old are you? 30
Where do you live? Springfield

--- Personal Information ---
 Name: Ada
 Age: 30
 Location: Springfield
 You are eligible to use our author services.
...
```

Age and page count must be whole numbers. If a number cannot be read, or
input ends before the form is complete, the command prints a message to
standard error and exits with status 1.

## Using it from Python

The book catalogue and each edition of the form can be used directly.
Every form takes a `Console`, which reads answers from one text stream and
writes to another (standard input and output by default):

```python
import io

from authorcompany.catalog import BOOKS, is_accepted_genre, numbered_listing
from authorcompany.console import Console
from authorcompany.upgraded import run_second_version

print(is_accepted_genre("Sci-fi"))  # True
print(numbered_listing(BOOKS))

answers = io.StringIO("Ada\n30\nSpringfield\nMy Book\n250\nSci-fi\nPass\n")
out = io.StringIO()
run_second_version(Console(answers, out))
print(out.getvalue())
```

- `authorcompany.catalog` holds the `Book` dataclass (with `summary()` and
  `credit()`), the `BOOKS` catalogue, `ACCEPTED_GENRES`, `STARTING_SALARY`,
  `numbered_listing()` and `is_accepted_genre()`.
- `authorcompany.console.Console` offers `ask()`, `ask_int()`, `say()` and
  `write()`.
- `authorcompany.early` has `Applicant`, `ask_applicant()`,
  `run_first_version()` and `run_bookstore()`.
- `authorcompany.upgraded` has `run_second_version()`, `run_last_version()`
  and `run_code_runner_version()`.

## What it does not do

Answers are only printed back; no application is stored, and the book
list is fixed and cannot be changed from the form.

## Running the tests

```
pip install ".[test]"
pytest
```