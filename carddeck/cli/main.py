"""Typer entry-point wiring for the carddeck CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..builder import new
from ..cards import Card
from ..config import DeckConfig, describe_pipeline, parse_pipeline, parse_rank, parse_suit
from ..transforms import Transformation
from .render import render_deck, render_stats

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _collect_steps(
    jokers: int,
    decks: int,
    exclude_suit: list[str] | None,
    exclude_rank: list[str] | None,
    order: str | None,
    shuffle: bool,
    seed: int | None,
    pipeline: str | None,
) -> list[Transformation]:
    try:
        config = DeckConfig(
            jokers=jokers,
            decks=decks,
            exclude_suits=tuple(parse_suit(text) for text in exclude_suit or ()),
            exclude_ranks=tuple(parse_rank(text) for text in exclude_rank or ()),
            order=order,
            shuffle=shuffle or seed is not None,
            seed=seed,
        )
        steps = config.steps()
        if pipeline:
            steps.extend(parse_pipeline(pipeline))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return steps


def _build(steps: list[Transformation]) -> list[Card]:
    if steps:
        logger.debug("pipeline: %s", describe_pipeline(steps))
    return new(*steps)


JOKERS_OPTION = typer.Option(0, min=0, help="Number of jokers to append.")
DECKS_OPTION = typer.Option(1, min=0, help="Number of concatenated copies of the deck.")
EXCLUDE_SUIT_OPTION = typer.Option(None, "--exclude-suit", help="Suit to leave out (repeatable).")
EXCLUDE_RANK_OPTION = typer.Option(None, "--exclude-rank", help="Rank to leave out (repeatable).")
ORDER_OPTION = typer.Option(None, help="Sort order: 'suit' or 'rank'.")
SHUFFLE_OPTION = typer.Option(False, "--shuffle", help="Shuffle the finished deck.")
SEED_OPTION = typer.Option(None, help="Shuffle with this seed for a reproducible order (implies --shuffle).")
PIPELINE_OPTION = typer.Option(
    None,
    help="Extra steps applied after the options above, e.g. 'jokers:2,sort:rank,shuffle:7'.",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log each pipeline step.")


@app.command()
def build(
    jokers: int = JOKERS_OPTION,
    decks: int = DECKS_OPTION,
    exclude_suit: list[str] | None = EXCLUDE_SUIT_OPTION,
    exclude_rank: list[str] | None = EXCLUDE_RANK_OPTION,
    order: str | None = ORDER_OPTION,
    shuffle: bool = SHUFFLE_OPTION,
    seed: int | None = SEED_OPTION,
    pipeline: str | None = PIPELINE_OPTION,
    plain: bool = typer.Option(False, "--plain", help="Print one card name per line."),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Build a deck and print it."""

    _configure_logging(verbose)
    steps = _collect_steps(jokers, decks, exclude_suit, exclude_rank, order, shuffle, seed, pipeline)
    cards = _build(steps)

    if plain:
        for card in cards:
            typer.echo(str(card))
        return
    console.print(render_deck(cards))


@app.command()
def stats(
    jokers: int = JOKERS_OPTION,
    decks: int = DECKS_OPTION,
    exclude_suit: list[str] | None = EXCLUDE_SUIT_OPTION,
    exclude_rank: list[str] | None = EXCLUDE_RANK_OPTION,
    pipeline: str | None = PIPELINE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print how many cards of each suit a deck variant holds."""

    _configure_logging(verbose)
    steps = _collect_steps(jokers, decks, exclude_suit, exclude_rank, None, False, None, pipeline)
    console.print(render_stats(_build(steps)))


def main() -> None:
    """Entry-point for ``python -m carddeck.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
