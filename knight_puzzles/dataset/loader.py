"""Read the Lichess puzzle database export (CSV) into dataset records."""

import csv
from pathlib import Path
from typing import Iterable, Iterator

from knight_puzzles.core.exceptions import MalformedEncodingError
from knight_puzzles.core.logger import get_logger
from knight_puzzles.core.models import DatasetRecord

logger = get_logger(__name__)

# Header of the export: PuzzleId,FEN,Moves,Rating,RatingDeviation,Popularity,NbPlays,Themes,GameUrl,OpeningTags
REQUIRED_COLUMNS = ("FEN", "Moves", "Rating")


def records_from_rows(rows: Iterable[dict[str, str]]) -> Iterator[DatasetRecord]:
    """Moves are space separated UCI moves, the first one is played by the opponent."""
    for row in rows:
        missing = [column for column in REQUIRED_COLUMNS if not row.get(column)]
        if missing:
            raise MalformedEncodingError(
                f"Puzzle row misses column(s) {','.join(missing)}: {row!r}"
            )
        try:
            rating = int(row["Rating"])
        except ValueError as exc:
            raise MalformedEncodingError(
                f"Puzzle rating must be a whole number, got {row['Rating']!r}"
            ) from exc
        yield DatasetRecord(
            fen=row["FEN"].strip(), moves=row["Moves"].split(), rating=rating
        )


def read_lichess_csv(path: str | Path) -> list[DatasetRecord]:
    with open(path, newline="", encoding="utf-8") as csv_file:
        records = list(records_from_rows(csv.DictReader(csv_file)))
    logger.info("Read %d puzzles from %s", len(records), path)
    return records
