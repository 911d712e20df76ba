"""Leitner CLI: study a deck snapshot file from the command line."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from leitner.application.buckets import get_bucket_range, to_bucket_sets
from leitner.application.config import AppConfig, resolve_config
from leitner.application.hints import get_hint
from leitner.application.scheduler import practice as select_practice
from leitner.application.stats import ProgressCalculator
from leitner.application.updater import find_bucket, update
from leitner.domain.errors import InvalidBucketsError
from leitner.domain.models import AnswerDifficulty, BucketMap, Flashcard, PracticeRecord
from leitner.infrastructure.snapshot import (
    DeckSnapshot,
    SnapshotError,
    find_card,
    load_snapshot,
    save_snapshot,
)

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="leitner: Modified-Leitner flashcard scheduler.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Manage leitner configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

VERBOSITY_LEVELS = {0: logging.ERROR, 1: logging.WARNING, 2: logging.INFO}


class Rating(str, Enum):
    wrong = "wrong"
    hard = "hard"
    easy = "easy"


DeckOption = Annotated[
    Path | None,
    typer.Option("--deck", "-d", help="Deck snapshot file (.yaml/.json). Defaults to config."),
]


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
):
    """Global settings for leitner."""
    ctx.ensure_object(dict)
    config = resolve_config({"verbose": verbose or None})
    ctx.obj["config"] = config
    logging.getLogger("leitner").setLevel(VERBOSITY_LEVELS.get(config.verbose, logging.DEBUG))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _config(ctx: typer.Context) -> AppConfig:
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        obj["config"] = resolve_config()
    return obj["config"]


def _deck_path(ctx: typer.Context, deck: Path | None) -> Path:
    path = deck or _config(ctx).deck_file
    if path is None:
        typer.secho("No deck given. Pass --deck or set LEITNER_DECK_FILE.", fg="red")
        raise typer.Exit(2)
    return path


def _load(path: Path) -> DeckSnapshot:
    try:
        return load_snapshot(path)
    except SnapshotError as e:
        typer.secho(str(e), fg="red")
        raise typer.Exit(1) from e


def _require_card(buckets: BucketMap, front: str) -> Flashcard:
    card = find_card(buckets, front)
    if card is None:
        typer.secho(f"No card with front '{front}' in any bucket.", fg="red")
        raise typer.Exit(1)
    return card


# ---------------------------------------------------------------------------
# Study commands
# ---------------------------------------------------------------------------


@app.command("practice")
def practice_cmd(
    ctx: typer.Context,
    deck: DeckOption = None,
    day: Annotated[
        int | None, typer.Option(min=0, help="Day number. Defaults to the snapshot's day.")
    ] = None,
):
    """List the cards due for [bold green]practice[/bold green] on a given day."""
    snapshot = _load(_deck_path(ctx, deck))
    buckets, _ = snapshot.to_domain()
    day = snapshot.day if day is None else day

    due = select_practice(to_bucket_sets(buckets), day)
    if not due:
        typer.secho(f"No cards due on day {day}.", fg="yellow")
        return

    typer.echo(f"Day {day}: {len(due)} cards due")
    for card in sorted(due, key=lambda c: (find_bucket(buckets, c), c.front)):
        typer.echo(f"  [{find_bucket(buckets, card)}] {card.front}")


@app.command("range")
def range_cmd(ctx: typer.Context, deck: DeckOption = None):
    """Show the lowest and highest occupied bucket."""
    snapshot = _load(_deck_path(ctx, deck))
    buckets, _ = snapshot.to_domain()

    bucket_range = get_bucket_range(to_bucket_sets(buckets))
    if bucket_range is None:
        typer.secho("No cards in any bucket.", fg="yellow")
        return
    typer.echo(f"Buckets {bucket_range.min_bucket}..{bucket_range.max_bucket}")


@app.command()
def hint(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front text of the card.")],
    deck: DeckOption = None,
):
    """Print a partial reveal of a card's front."""
    config = _config(ctx)
    snapshot = _load(_deck_path(ctx, deck))
    buckets, _ = snapshot.to_domain()

    card = _require_card(buckets, front)
    typer.echo(get_hint(card, placeholder=config.hint_placeholder))


@app.command()
def answer(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front text of the practiced card.")],
    difficulty: Annotated[
        Rating, typer.Argument(case_sensitive=False, help="How well you recalled it.")
    ],
    deck: DeckOption = None,
    day: Annotated[
        int | None, typer.Option(min=0, help="Day of the trial. Defaults to the snapshot's day.")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show the move without saving.")
    ] = False,
):
    """Record an answer and move the card to its new bucket."""
    path = _deck_path(ctx, deck)
    snapshot = _load(path)
    buckets, history = snapshot.to_domain()
    day = snapshot.day if day is None else day
    rating = AnswerDifficulty[difficulty.value.upper()]

    card = _require_card(buckets, front)
    previous = find_bucket(buckets, card)
    new_buckets = update(buckets, card, rating)
    current = find_bucket(new_buckets, card)

    typer.echo(f"Moved '{card.front}' from bucket {previous} to bucket {current}.")
    if dry_run:
        typer.secho("[DRY RUN] Snapshot not saved.", fg="yellow")
        return

    history.append(
        PracticeRecord(
            card_front=card.front,
            card_back=card.back,
            difficulty=rating,
            day=day,
            previous_bucket=previous,
            new_bucket=current,
        )
    )
    save_snapshot(path, DeckSnapshot.from_domain(new_buckets, history, day=snapshot.day))


@app.command()
def progress(
    ctx: typer.Context,
    deck: DeckOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Summarize learning progress from buckets and practice history."""
    config = _config(ctx)
    snapshot = _load(_deck_path(ctx, deck))
    buckets, history = snapshot.to_domain()

    try:
        stats = ProgressCalculator(hardest_limit=config.hardest_cards_limit).compute(
            buckets, history
        )
    except InvalidBucketsError as e:
        typer.secho(f"Cannot compute progress: {e}", fg="red")
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "total_cards": stats.total_cards,
                    "cards_by_bucket": stats.cards_by_bucket,
                    "retired_cards": stats.retired_cards,
                    "success_rate": stats.success_rate,
                    "hardest_cards": [
                        {"front": c.front, "back": c.back} for c in stats.hardest_cards
                    ],
                    "average_moves_per_card": stats.average_moves_per_card,
                    "total_practice_events": stats.total_practice_events,
                },
                indent=2,
            )
        )
        return

    typer.echo(f"Cards: {stats.total_cards}  Retired: {stats.retired_cards}")
    for number, count in stats.cards_by_bucket.items():
        typer.echo(f"  Bucket {number}: {count}")
    typer.echo(
        f"Practice events: {stats.total_practice_events}"
        f"  Success rate: {stats.success_rate:.1f}%"
        f"  Avg moves/card: {stats.average_moves_per_card:.2f}"
    )
    if stats.hardest_cards:
        typer.secho("Hardest cards:", fg="yellow")
        for card in stats.hardest_cards:
            typer.echo(f"  {card.front} -> {card.back}")


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context):
    """Display final resolved configuration."""
    config = _config(ctx)
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))
