"""Listing option grammar.

Raw tokens are split into (option, parameter) pairs, checked against the
option table, and turned into a FilterSpec. Pure functions - no I/O.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from . import filters
from .dates import parse_date
from .errors import DateParseError, InvalidCommandError, MissingArgumentError
from .filters import FilterSpec

logger = logging.getLogger(__name__)

# option -> description of its parameter, or None for flags
OPTIONS: dict[str, str | None] = {
    "--today": None,
    "--date": "date",
    "--before-date": "date",
    "--after-date": "date",
    "--categories": "categories",
    "--exclude": None,
    "--no-category": None,
}

_DATE_SELECTORS = ("--today", "--date", "--before-date", "--after-date")


@dataclass(frozen=True)
class OptionPair:
    """An option and the parameter that followed it, if any."""

    option: str
    parameter: str | None = None


def _is_option(token: str) -> bool:
    return token.startswith("--")


def tokenize(tokens: list[str]) -> list[OptionPair]:
    """
    Group tokens into option/parameter pairs in command-line order.

    An option takes the following token as its parameter unless that token
    is itself an option; `--option=value` carries its parameter inline. A
    token that follows no option is an error.
    """
    pairs: list[OptionPair] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not _is_option(token):
            raise InvalidCommandError(f"unexpected argument: {token}")
        if "=" in token:
            option, _, parameter = token.partition("=")
            pairs.append(OptionPair(option, parameter))
            i += 1
            continue
        parameter = None
        if i + 1 < len(tokens) and not _is_option(tokens[i + 1]):
            parameter = tokens[i + 1]
            i += 1
        pairs.append(OptionPair(token, parameter))
        i += 1
    return pairs


def validate(pairs: list[OptionPair]) -> None:
    """Check pairs against the option table. Raises on the first problem."""
    seen: set[str] = set()
    for index, pair in enumerate(pairs):
        if pair.option not in OPTIONS:
            raise InvalidCommandError(f"unknown option: {pair.option}")
        if pair.option in seen:
            raise InvalidCommandError(f"{pair.option} given more than once")
        seen.add(pair.option)

        what = OPTIONS[pair.option]
        if what is None and pair.parameter is not None:
            raise InvalidCommandError(f"{pair.option} takes no argument, got {pair.parameter!r}")
        if what is not None and pair.parameter is None:
            raise MissingArgumentError(pair.option, what)

        if pair.option == "--exclude" and (index == 0 or pairs[index - 1].option != "--categories"):
            raise InvalidCommandError("--exclude must directly follow --categories")

    selectors = {"range" if o in ("--before-date", "--after-date") else o for o in seen if o in _DATE_SELECTORS}
    if len(selectors) > 1:
        raise InvalidCommandError("use only one of --today, --date, or --before-date/--after-date")


def _date_predicate(pair: OptionPair, make: Callable[[date], filters.Predicate]) -> filters.Predicate:
    """Build a date predicate, failing closed on an unparseable date."""
    try:
        bound = parse_date(pair.parameter)
    except DateParseError as e:
        logger.warning(f"{pair.option}: {e}; nothing will match")
        return filters.match_nothing()
    return make(bound)


def build_filter(pairs: list[OptionPair], reference: date) -> FilterSpec:
    """
    Validate option pairs and build the corresponding FilterSpec.

    Raises:
        InvalidCommandError: unknown option or invalid combination
        MissingArgumentError: an option is missing its parameter
    """
    validate(pairs)
    options = [pair.option for pair in pairs]
    spec = FilterSpec()

    for pair in pairs:
        match pair.option:
            case "--today":
                spec = spec.also(filters.today(reference))
            case "--date":
                spec = spec.also(_date_predicate(pair, filters.date_equals))
            case "--before-date":
                spec = spec.also(_date_predicate(pair, filters.date_before))
            case "--after-date":
                spec = spec.also(_date_predicate(pair, filters.date_after))
            case "--categories":
                categories = filters.split_categories(pair.parameter)
                if "--exclude" in options:
                    spec = spec.also(filters.category_excluded(categories))
                else:
                    spec = spec.also(filters.category_in(categories))
            case "--no-category":
                spec = spec.also(filters.no_category())
            case "--exclude":
                pass

    return spec


def parse_filter(tokens: list[str], reference: date) -> FilterSpec:
    """Tokenize and build a FilterSpec in one step."""
    return build_filter(tokenize(tokens), reference)
