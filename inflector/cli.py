import logging
import sys
import typing

import click
import coloredlogs

from . import __version__, constants, inflection, store

store.load_from_env()

logger = logging.getLogger(constants.LOGGER_NAME)
logger.parent = None

words_argument = click.argument("words", nargs=-1)


def install_logger(debug: bool):
    coloredlogs.install(
        level=logging.DEBUG if debug else logging.INFO,
        logger=logger,
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%H:%M:%S',
    )

    return logger


def _read_inputs(words: typing.Tuple[str, ...]) -> typing.List[str]:
    if words:
        return list(words)

    stdin = sys.stdin
    if stdin is None or stdin.isatty():
        raise click.UsageError("no word given, pass them as arguments or pipe them on stdin")

    inputs = [
        line.rstrip("\r\n")
        for line in stdin
        if line.strip()
    ]

    if not inputs:
        raise click.UsageError("stdin is empty")

    return inputs


def _echo_each(
    function: typing.Callable[..., str],
    words: typing.Tuple[str, ...],
    **kwargs,
):
    for word in _read_inputs(words):
        click.echo(function(word, **kwargs))


@click.group()
@click.version_option(__version__.__version__, prog_name=__version__.__title__)
@click.option("--debug", envvar=constants.DEBUG_ENV_VAR, is_flag=True, help="Log which rule decided each result.")
def cli(
    debug: bool,
):
    store.debug = debug or bool(store.debug)

    install_logger(store.debug)


@cli.command(help="Render singular nouns in their plural form.")
@click.option("--override", help="Print this instead of the computed plural.")
@words_argument
def pluralize(
    override: typing.Optional[str],
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.pluralize, words, override=override)


@cli.command(help="Render plural nouns in their singular form.")
@click.option("--override", help="Print this instead of the computed singular.")
@words_argument
def singularize(
    override: typing.Optional[str],
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.singularize, words, override=override)


@cli.command(help="Render underscored words in camel case, translating \"/\" into \"::\".")
@click.option("--lower-first", is_flag=True, help="Keep the first letter in lower case.")
@click.option("--already-lowercased", is_flag=True, help="Do not lower case the input first.")
@words_argument
def camelize(
    lower_first: bool,
    already_lowercased: bool,
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.camelize, words, lower_first=lower_first, already_lowercased=already_lowercased)


@cli.command(help="Render camel cased words underscored, translating \"::\" into \"/\".")
@words_argument
def underscore(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.underscore, words)


@cli.command(help="Render underscored words in a human readable form.")
@click.option("--lower-first", is_flag=True, help="Keep the first letter in lower case.")
@words_argument
def humanize(
    lower_first: bool,
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.humanize, words, lower_first=lower_first)


@cli.command(help="Lower case the words and upper case their first letter.")
@click.option("--keep-case", is_flag=True, help="Only upper case the first letter.")
@words_argument
def capitalize(
    keep_case: bool,
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.capitalize, words, keep_case=keep_case)


@cli.command(help="Lower case the first letter of the words.")
@words_argument
def decapitalize(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.decapitalize, words)


@cli.command(help="Replace spaces and underscores with dashes.")
@words_argument
def dasherize(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.dasherize, words)


@cli.command(help="Capitalize words as for a book title.")
@words_argument
def titleize(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.titleize, words)


@cli.command(help="Remove the module prefix of class names.")
@words_argument
def demodulize(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.demodulize, words)


@cli.command(help="Render camel cased class names as underscored plural table names.")
@words_argument
def tableize(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.tableize, words)


@cli.command(help="Render underscored plural table names as camel cased class names.")
@words_argument
def classify(
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.classify, words)


@cli.command(name="foreign-key", help="Render class names as foreign key column names.")
@click.option("--drop-underscore", is_flag=True, help="Do not separate the name from `id`.")
@words_argument
def foreign_key(
    drop_underscore: bool,
    words: typing.Tuple[str, ...],
):
    _echo_each(inflection.foreign_key, words, drop_underscore=drop_underscore)


@cli.command(help="Append ordinal suffixes (1st, 22nd, ...) to the numbers of a text.")
@click.argument("text", nargs=-1)
def ordinalize(
    text: typing.Tuple[str, ...],
):
    if text:
        click.echo(inflection.ordinalize(" ".join(text)))
        return

    _echo_each(inflection.ordinalize, text)
