"""Interactive command line front end for the county datasets."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from .config import DATASET_CONFIG
from .core import AddStatus, InvalidUserInput, Record
from .core.exceptions import DatasetError
from .pipelines import DatasetSession
from .services import SCHEMAS
from .utils import title_case

LOGGER = logging.getLogger(__name__)

CODE_VIEW_MODES = {
    "n": ("county",),
    "s": ("seat",),
    "b": ("county", "seat"),
}

CITY_VIEW_MODES = {
    "l": ("prefix",),
    "c": ("county",),
    "b": ("county", "prefix"),
}


class QuitRequested(Exception):
    """The user asked to leave the program."""


class Prompter:
    """Read folded answers from the user and print responses."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.input_func = input_func
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def ask(self, prompt: str, *, quit_word: str | None = "q") -> str:
        try:
            answer = self.input_func(prompt)
        except EOFError as exc:
            raise QuitRequested() from exc
        answer = answer.strip().lower()
        if quit_word is not None and answer == quit_word:
            raise QuitRequested()
        return answer

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def warn(self, text: str) -> None:
        print(text, file=self.err)


def _show(prompter: Prompter, session: DatasetSession, heading: str, record: Record, fields: Iterable[str]) -> None:
    prompter.say()
    prompter.say(heading)
    for label, value in session.lookup.project(session.store, record, fields):
        prompter.say(f"{label}: {value}")
    prompter.say()


def _code_range(session: DatasetSession) -> str:
    codes = sorted(session.store.keys())
    if not codes:
        return "a county number"
    return f"a number from {codes[0]}-{codes[-1]}"


def run_code_lookup(session: DatasetSession, prompter: Prompter) -> None:
    """Look up counties by numeric code until the user quits."""

    while True:
        try:
            answer = prompter.ask("Enter your county number ('q' to quit): ")
        except QuitRequested:
            return

        if not answer:
            prompter.say("Please enter some text")
            continue

        try:
            record = session.find(answer)
        except InvalidUserInput:
            prompter.warn(f"Invalid input, please enter {_code_range(session)}.")
            prompter.say()
            continue

        if record is None:
            prompter.warn(f"Invalid county code, please enter {_code_range(session)}")
            continue

        while True:
            try:
                mode = prompter.ask(
                    "Do you want to view county name ('n'), seat ('s'), both ('b') or go back ('q')? "
                )
            except QuitRequested:
                break
            if mode in CODE_VIEW_MODES:
                heading = f"Information for county number {record['code'].strip()}: "
                _show(prompter, session, heading, record, CODE_VIEW_MODES[mode])
                break
            prompter.say(
                "Invalid view mode, please enter 'n' for county name, 's' for seat, "
                "'b' for both, or 'q' to go back."
            )


def _choose_city_view(prompter: Prompter) -> tuple[str, ...]:
    prompter.say("When viewing county data,")
    while True:
        mode = prompter.ask(
            "do you want to view license plate prefix ('l'), county ('c'), "
            "or both ('b')? ('q' to quit) "
        )
        if mode in CITY_VIEW_MODES:
            return CITY_VIEW_MODES[mode]
        prompter.say(f"Invalid view mode: {mode}")


def _offer_add(session: DatasetSession, prompter: Prompter, city: str) -> None:
    while True:
        answer = prompter.ask("Would you like to add it to the database? (y/n) ")
        if answer == "n":
            return
        if answer == "y":
            break
        prompter.say("Invalid option, please enter y or n.")

    while True:
        prompter.say()
        prompter.say(
            "Given county must be a valid Montana county, type 'l' to list all counties in Montana"
        )
        county = prompter.ask(f"Enter county for {title_case(city)}: ")

        if county == "l":
            for name in session.counties():
                prompter.say(name)
            continue

        outcome = session.add(city, county)
        if outcome.status is AddStatus.NOT_A_VALID_COUNTY:
            prompter.say(f"{county} is not a county in Montana, consider checking your spelling")
            prompter.say()
            continue
        if outcome.status is AddStatus.ALREADY_PRESENT:
            prompter.say(f"{title_case(city)} is already in the database")
            prompter.say()
            return
        if outcome.status is AddStatus.INTERNAL_INCONSISTENCY:
            raise DatasetError(
                f"Could not add {title_case(city)} to {session.path}; the dataset no longer matches memory",
                details={"city": city, "county": county},
            )

        prompter.say()
        prompter.say(f"Successfully added {title_case(city)} to the database")
        prompter.say()
        return


def run_city_lookup(session: DatasetSession, prompter: Prompter) -> None:
    """Look up cities, offering to add unknown ones, until the user quits."""

    try:
        fields = _choose_city_view(prompter)
        while True:
            city = prompter.ask("Enter city name ('q' to quit): ")
            if not city:
                prompter.say("Please enter some text")
                continue

            record = session.find(city)
            if record is not None:
                _show(prompter, session, f"Information for {title_case(city)}: ", record, fields)
                continue

            prompter.say()
            prompter.say(f"The database doesn't have records for {title_case(city)}")
            try:
                _offer_add(session, prompter, city)
            except InvalidUserInput as error:
                prompter.warn(str(error))
    except QuitRequested:
        return


RUNNERS = {
    "codes": run_code_lookup,
    "cities": run_city_lookup,
}


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up Montana counties by code or by city name.")
    parser.add_argument(
        "dataset",
        choices=sorted(RUNNERS),
        help="'codes' to look up counties by number, 'cities' to look up and add cities",
    )
    parser.add_argument(
        "--data",
        type=Path,
        help="Path to the dataset CSV; defaults to the configured file for the dataset",
    )
    parser.add_argument(
        "--encoding",
        default=DATASET_CONFIG.encoding,
        help="Encoding of the dataset file, or 'auto' to detect it (default: %(default)s)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        default=DATASET_CONFIG.skip_malformed,
        help="Skip lines with missing fields instead of stopping with an error.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeat for debug output)",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None, *, prompter: Prompter | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    path = args.data or DATASET_CONFIG.path_for(args.dataset)
    prompter = prompter or Prompter()

    try:
        session = DatasetSession.open(
            SCHEMAS[args.dataset],
            path,
            encoding=args.encoding,
            skip_malformed=args.skip_malformed,
        )
        RUNNERS[args.dataset](session, prompter)
    except DatasetError as error:
        LOGGER.error("%s", error)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
