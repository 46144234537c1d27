"""The reworked author application questionnaires with eligibility gates."""

from __future__ import annotations

from authorcompany.catalog import (
    ACCEPTED_GENRES,
    BOOKS,
    STARTING_SALARY,
    is_accepted_genre,
    numbered_listing,
)
from authorcompany.console import Console
from authorcompany.early import Applicant, ask_applicant

PASS_STATUS = "Pass"
SUCCESS_REQUIREMENTS: tuple[str, ...] = (
    "Maintain a 4.0+ rating for 90 days.",
    "Become a top recommendation on Amazon.",
    "Be recognized globally for 120 days.",
    "Host 35+ events per year.",
    "Be in the top 10 authors for at least 2 years.",
)
ELIGIBLE_MESSAGE = " You are eligible to use our author services."
THANKS_MESSAGE = "\n✅ Thank you for applying to Author Company!"
_FEATURED = (BOOKS[0], BOOKS[1], BOOKS[6])


def _greet_and_report(console: Console) -> Applicant:
    console.say(" Welcome to Author Company!")
    applicant = ask_applicant(console)
    console.say("\n--- Personal Information ---")
    console.say(f" Name: {applicant.name}")
    console.say(f" Age: {applicant.age}")
    console.say(f" Location: {applicant.place}")
    return applicant


def _say_example(console: Console, prefix: str) -> None:
    example = BOOKS[0]
    console.say(" Example of a successful book:")
    console.say(
        f'{prefix}"{example.title}" with rating {example.rating:.1f} '
        "(10k reviews in 48 hours)"
    )


def _say_requirements(console: Console) -> None:
    console.say("\n Success Requirements:")
    for number, requirement in enumerate(SUCCESS_REQUIREMENTS, start=1):
        console.say(f"{number}. {requirement}")


def _say_featured(console: Console) -> None:
    for book in _FEATURED:
        console.say(f"- {book.credit()}")


def _say_genre_notes(console: Console) -> None:
    console.say("\n Additional Notes:")
    console.say(" Your title must be unique.")
    console.write(" Your book must fit in one of these genres: ")
    console.write(", ".join(ACCEPTED_GENRES))
    console.say(f"\n💼 Starting salary: ${STARTING_SALARY}")


def _finish(console: Console) -> None:
    console.write(numbered_listing(BOOKS))
    console.say(THANKS_MESSAGE)


def run_second_version(console: Console) -> None:
    """Run the questionnaire that rejects genres the company does not accept."""
    applicant = _greet_and_report(console)
    if not applicant.eligible:
        console.say(" You are not eligible for our services.")
        return
    console.say(ELIGIBLE_MESSAGE)

    console.say("\n Author Application Form")
    console.ask("Enter your book's title: ")
    console.ask_int("How many pages? ")
    genre = console.ask(
        "Choose your book genre (Options: Self-Help, Sci-fi, Research): "
    )
    if not is_accepted_genre(genre):
        console.say(
            "\n❌ Invalid genre. Please submit only Self-Help, Sci-fi, or Research."
        )
        return

    status = console.ask("Enter rule check status (Pass/Fail): ")
    console.say("\n--- Review Status ---")
    if status == PASS_STATUS:
        console.say(" Congratulations! You passed our initial review.")
        console.say(f" Your submitted genre: {genre}")
        _say_example(console, "")
        _say_requirements(console)
    else:
        console.say(" You failed the rule check. View some successful authors:")
        _say_featured(console)
        console.say(" Note: You will need to pay a review fee.")

    _say_genre_notes(console)
    _finish(console)


def run_code_runner_version(console: Console) -> None:
    """Run the questionnaire that does not ask for a genre."""
    applicant = _greet_and_report(console)
    if not applicant.eligible:
        console.say(" You are not eligible for our services.")
        return
    console.say(ELIGIBLE_MESSAGE)

    console.say("\n Author Application Form")
    console.ask("Enter your book's title: ")
    console.ask_int("How many pages? ")
    status = console.ask("Enter rule check status (Pass/Fail): ")

    console.say("\n--- Review Status ---")
    if status == PASS_STATUS:
        console.say(" Congratulations! You passed our initial review.")
        _say_example(console, "")
        _say_requirements(console)
    else:
        console.say(" You failed the rule check. View some successful authors:")
        _say_featured(console)
        console.say(" Note: You will need to pay a review fee.")

    _say_genre_notes(console)
    _finish(console)


def run_last_version(console: Console) -> None:
    """Run the latest questionnaire, which records any genre given."""
    applicant = _greet_and_report(console)
    if not applicant.eligible:
        console.say(" You are not eligible to use our author services.")
        return
    console.say(ELIGIBLE_MESSAGE)

    console.say("\n Author Application Form")
    console.ask("Enter your book's title: ")
    console.ask_int("How many pages? ")
    genre = console.ask("Enter your book's genre: ")
    status = console.ask("Enter rule check status (Pass/Fail): ")

    console.say("\n--- Review Status ---")
    if status == PASS_STATUS:
        console.say("✅ Congratulations! You passed our initial review.")
        console.say(f" Your chosen genre: {genre}")
        _say_example(console, " ")
        _say_requirements(console)
    else:
        console.say("❌ You failed the rule check. View successful examples:")
        _say_featured(console)
        console.say(" You will need to pay a review fee.")

    console.say("\n Additional Notes:")
    console.say("• Title must be unique.")
    console.say(f"• Genre submitted: {genre}")
    console.say(f"💼 Starting salary: ${STARTING_SALARY}")
    _finish(console)