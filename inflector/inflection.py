import logging
import re
import typing

from . import constants
from .rules import (ID_SUFFIX, NON_TITLECASED_WORDS, PLURAL_RULES,
                    SINGULAR_RULES, SPACE_OR_UNDERBAR, UNCOUNTABLE_WORDS,
                    UNDERBAR, UNDERBAR_PREFIX, UPPERCASE, RuleTable)

logger = logging.getLogger(constants.LOGGER_NAME)

ORDINAL_SUFFIXES = {
    "1": "st",
    "2": "nd",
    "3": "rd",
}

ORDINAL_TEENS = ("11", "12", "13")

INTEGER = re.compile(r"[+-]?[0-9]+")


def apply_rules(
    word: str,
    rules: RuleTable,
    skip: typing.Collection[str] = UNCOUNTABLE_WORDS,
    override: typing.Optional[str] = None,
) -> str:
    """
    Rewrite `word` with the first rule of `rules` that matches it.

    A non-empty `override` is returned as is, and words listed in `skip`
    (compared lower-cased) are returned unchanged.
    """

    if override:
        logger.debug("%r: override -> %r", word, override)
        return override

    if word.lower() in skip:
        logger.debug("%r: skipped", word)
        return word

    for rule in rules:
        if rule.matches(word):
            result = rule.apply(word)

            logger.debug("%r: %r -> %r", word, rule, result)
            return result

    logger.debug("%r: no rule matched", word)
    return word


def pluralize(word: str, override: typing.Optional[str] = None) -> str:
    """
    "person" -> "people", "octopus" -> "octopi", "Hat" -> "Hats"
    """

    return apply_rules(word, PLURAL_RULES, UNCOUNTABLE_WORDS, override)


def singularize(word: str, override: typing.Optional[str] = None) -> str:
    """
    "people" -> "person", "octopi" -> "octopus", "Hats" -> "Hat"
    """

    return apply_rules(word, SINGULAR_RULES, UNCOUNTABLE_WORDS, override)


def camelize(
    word: str,
    lower_first: bool = False,
    already_lowercased: bool = False,
) -> str:
    """
    Render an underscored word in camel case, "/" becoming "::".

    With `lower_first`, the first letter of the last path segment stays lower case.
    """

    if not already_lowercased:
        word = word.lower()

    segments = word.split("/")
    for index, segment in enumerate(segments):
        pieces = segment.split("_")

        start = 1 if lower_first and index + 1 == len(segments) else 0
        for position in range(start, len(pieces)):
            piece = pieces[position]
            pieces[position] = piece[:1].upper() + piece[1:]

        segments[index] = "".join(pieces)

    return "::".join(segments)


def underscore(word: str) -> str:
    """
    Render a camel cased word lower cased and underscored, "::" becoming "/".
    """

    segments = [
        UNDERBAR_PREFIX.sub("", UPPERCASE.sub(r"_\1", segment))
        for segment in word.split("::")
    ]

    return "/".join(segments).lower()


def humanize(word: str, lower_first: bool = False) -> str:
    word = word.lower()
    word = ID_SUFFIX.sub("", word)
    word = UNDERBAR.sub(" ", word)

    if not lower_first:
        word = capitalize(word)

    return word


def capitalize(word: str, keep_case: bool = False) -> str:
    if not keep_case:
        word = word.lower()

    # titlecase, not uppercase: "ß" becomes "Ss"
    return word[:1].title() + word[1:]


def decapitalize(word: str) -> str:
    return word[:1].lower() + word[1:]


def dasherize(word: str) -> str:
    return SPACE_OR_UNDERBAR.sub("-", word)


def titleize(word: str) -> str:
    """
    Capitalize words as for a book title.

    Articles, conjunctions and short prepositions are left lower cased,
    except as the very first word.
    """

    word = UNDERBAR.sub(" ", word.lower())

    tokens = []
    for token in word.split(" "):
        parts = [
            part if part in NON_TITLECASED_WORDS else capitalize(part)
            for part in token.split("-")
        ]

        tokens.append("-".join(parts))

    return capitalize(" ".join(tokens), keep_case=True)


def demodulize(word: str) -> str:
    return word.split("::")[-1]


def tableize(word: str) -> str:
    return pluralize(underscore(word))


def classify(word: str) -> str:
    return singularize(camelize(word))


def foreign_key(word: str, drop_underscore: bool = False) -> str:
    separator = "" if drop_underscore else "_"

    return f"{underscore(demodulize(word))}{separator}id"


def _ordinal_suffix(number: str) -> str:
    if number[-2:] in ORDINAL_TEENS:
        return "th"

    return ORDINAL_SUFFIXES.get(number[-1:], "th")


def ordinalize(text: str) -> str:
    """
    Append an ordinal suffix to every integer found in `text`.

    Tokens are split on whitespace and joined back with single spaces.
    Tokens that are not integers are kept as is.
    """

    tokens = []
    for token in text.split():
        if INTEGER.fullmatch(token):
            token += _ordinal_suffix(token)

        tokens.append(token)

    return " ".join(tokens)
