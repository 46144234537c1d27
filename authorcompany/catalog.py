"""The company's book catalogue and the rules for submitted genres."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

STARTING_SALARY = 70000
ACCEPTED_GENRES: tuple[str, ...] = ("Self-Help", "Sci-fi", "Research")
LISTING_HEADER = "--- Company Book List ---"


@dataclass(frozen=True)
class Book:
    """A book published by the company."""

    id: str
    title: str
    author: str
    genre: str
    rating: float

    def summary(self) -> str:
        """Title, author, genre and rating on one line."""
        return (
            f"{self.title} by {self.author} "
            f"(Genre: {self.genre}, Rating: {self.rating:.1f})"
        )

    def credit(self) -> str:
        """The quoted title followed by its author."""
        return f'"{self.title}" by {self.author}'


BOOKS: tuple[Book, ...] = (
    Book("1", "To Kill a Mockingbird", "Harper Lee", "Classic Fiction", 4.8),
    Book("2", "Atomic Habits", "James Clear", "Self-Help", 4.5),
    Book("3", "The Great Gatsby", "F. Scott Fitzgerald", "Classic Fiction", 4.0),
    Book("4", "The Subtle Art of Not Giving a Fck*", "Mark Manson", "Self-Help", 4.2),
    Book("5", "Crime and Punishment", "Fyodor Dostoevsky", "Classic", 4.0),
    Book("6", "The Great Gatsby", "F. Scott Fitzgerald", "Classic Fiction", 4.0),
    Book("7", "Educated", "Tara Westover", "Inspiration", 3.5),
    Book("8", "The Pragmatic Programmer", "Andrew Hunt & David Thomas", "Programming", 3.0),
    Book("9", "Clean Code", "Andrew Hunt", "Programming", 3.0),
    Book("10", "The Midnight Library", "Matt Haig", "Fiction", 3.5),
    Book("11", "Thinking, Fast and Slow", "Daniel Kahneman", "Psychology", 2.8),
)


def numbered_listing(books: Iterable[Book]) -> str:
    """Render the company book list, one numbered line per book."""
    lines = [f"\n{LISTING_HEADER}\n"]
    lines.extend(
        f'{number:2d}. "{book.title}" by {book.author} '
        f"| Genre: {book.genre} | Rating: {book.rating:.1f}\n"
        for number, book in enumerate(books, start=1)
    )
    return "".join(lines)


def is_accepted_genre(genre: str) -> bool:
    """Whether the genre is one the company accepts, matched exactly."""
    return genre in ACCEPTED_GENRES