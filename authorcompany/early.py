"""The first two versions of the author application questionnaire."""

from __future__ import annotations

from dataclasses import dataclass

from authorcompany.catalog import ACCEPTED_GENRES, BOOKS, LISTING_HEADER, STARTING_SALARY
from authorcompany.console import Console

ADULT_AGE = 18
FAIL_STATUS = "Fail"
DIVIDER = "-----------------------------------"
SUCCESS_REQUIREMENTS: tuple[str, ...] = (
    "Maintain at least a 4.0 rating for 90 days.",
    "It become one of most recommend book on Amazon book",
    "You have become more popular around the world for 120 days",
    "You have to make 35 event at least for a year",
    "You have become top 10 Authur for 2 year for Publish",
)
_FEATURED = (BOOKS[0], BOOKS[1], BOOKS[6])


@dataclass(frozen=True)
class Applicant:
    """The personal details an applicant gives."""

    name: str
    age: int
    place: str

    @property
    def eligible(self) -> bool:
        """Whether the applicant is old enough for the company's services."""
        return self.age >= ADULT_AGE


def ask_applicant(console: Console) -> Applicant:
    """Ask for name, age and place of residence."""
    name = console.ask("What is your name? ")
    age = console.ask_int("How old are you? ")
    place = console.ask("Where do you live? ")
    return Applicant(name, age, place)


def _report_applicant(console: Console, applicant: Applicant) -> None:
    console.say(f"Your name is {applicant.name}")
    if applicant.eligible:
        console.say(f"Your age is {applicant.age}, you have access to our services.")
    else:
        console.say(f"Your age is {applicant.age}, you are not eligible for our services.")
    console.say(f"You live in {applicant.place}")


def run_first_version(console: Console) -> None:
    """Run the original questionnaire."""
    console.say("Welcome to Author Company")
    applicant = ask_applicant(console)
    _report_applicant(console, applicant)
    console.say(DIVIDER)

    console.say("This Form to become Auther")
    console.ask("What is the name of your title books?\n")
    console.ask_int("How much page your books do you want?\n")
    console.say("There is a rules")
    rules = console.ask("Enter rules status (e.g., Pass or Fail): ")

    if rules == FAIL_STATUS:
        return

    console.say(f"Title: {BOOKS[0].title}")
    console.say("It have become 10k review for last 48")
    for book in BOOKS:
        console.say(f"{book.title} by {book.author} (Rating: {book.rating:.1f})")
    console.say("There are also you have your title become uniqe")
    console.say(f"You have a one requriment is has your book: {ACCEPTED_GENRES[0]}")
    console.say(f"Our Salary is {STARTING_SALARY}")
    console.say("You have to pay because you fail for our requirement")
    for book in BOOKS:
        console.say(book.title)


def run_bookstore(console: Console) -> None:
    """Run the questionnaire with review status, notes and the book list."""
    console.say("Welcome to Author Company")
    applicant = ask_applicant(console)
    console.say("\n--- Personal Information ---")
    _report_applicant(console, applicant)

    console.say(f"\n{DIVIDER}")
    console.say("This form is to become an Author.")
    console.ask("What is the title of your book? ")
    console.ask_int("How many pages does your book have? ")
    rules = console.ask("Enter the rule check status (Pass/Fail): ")
    failed = rules == FAIL_STATUS

    console.say("\n--- Review Status ---")
    if not failed:
        example = BOOKS[0]
        console.say("Book example for success:")
        console.say(f"Title: {example.title}, Rating: {example.rating:.1f}")
        console.say("It received 10k reviews in the last 48 hours.")
        for number, requirement in enumerate(SUCCESS_REQUIREMENTS, start=1):
            console.say(f"Requirement {number}: {requirement}")
    else:
        console.say("You failed the rule check. Here's a list of successful authors:")
        for book in _FEATURED:
            console.say(f"{book.title} by {book.author}")

    console.say("\n--- Additional Notes ---")
    console.say("Your title must be unique.")
    console.write("Your book must match one of our genres: ")
    console.say("".join(f"{genre} " for genre in ACCEPTED_GENRES))
    console.say(f"Our starting salary is ${STARTING_SALARY}")
    if failed:
        console.say("You must pay a review fee because you failed our requirements.")

    console.say(f"\n{LISTING_HEADER}")
    for book in BOOKS:
        console.say(book.summary())