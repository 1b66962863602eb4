"""
Picking a random puzzle of (roughly) the requested difficulty.
----

The dataset is laid out sorted by rating, in partitions of SORT_KEYS_PER_PARTITION puzzles each.
Few puzzles are rated very low or very high, so the brackets below cover very different amounts of partitions.

NOTE: a bracket only guarantees the puzzle comes from the same region of the dataset, not that its rating
is close to the requested one.
"""

from dataclasses import dataclass
from random import Random

from knight_puzzles.core.logger import get_logger
from knight_puzzles.core.models import DatasetKey

logger = get_logger(__name__)

SORT_KEYS_PER_PARTITION = 30


@dataclass(frozen=True)
class PartitionBracket:
    """Ratings below `rating_below` map onto partition keys first_key..last_key (both inclusive)"""

    rating_below: int | None
    first_key: int
    last_key: int

    def contains_rating(self, rating: int) -> bool:
        return self.rating_below is None or rating < self.rating_below

    def draw_partition_key(self, rng: Random) -> int:
        return rng.randint(self.first_key, self.last_key)


# Ordered from low to high. The last bracket has no upper bound, so every rating finds one.
PARTITION_BRACKETS: tuple[PartitionBracket, ...] = (
    PartitionBracket(700, 1, 4559),
    PartitionBracket(1000, 4560, 19269),
    PartitionBracket(1200, 19270, 32530),
    PartitionBracket(1400, 32531, 46495),
    PartitionBracket(1600, 46496, 61702),
    PartitionBracket(1800, 61703, 72660),
    PartitionBracket(2000, 72661, 81831),
    PartitionBracket(2200, 81832, 89101),
    PartitionBracket(2400, 89102, 93562),
    PartitionBracket(2600, 93563, 96052),
    PartitionBracket(None, 96053, 96813),
)


def bracket_for_rating(rating: int) -> PartitionBracket:
    """First bracket (lowest upper bound) the rating falls under."""
    return next(
        bracket for bracket in PARTITION_BRACKETS if bracket.contains_rating(rating)
    )


def draw_sort_key(rng: Random) -> int:
    return rng.randint(1, SORT_KEYS_PER_PARTITION)


def select_dataset_key(rating: int, rng: Random) -> DatasetKey:
    """Random partition key within the bracket of the rating + an independent random sort key."""
    bracket = bracket_for_rating(rating)
    key = DatasetKey(
        partition_key=bracket.draw_partition_key(rng),
        sort_key=draw_sort_key(rng),
    )
    logger.debug("Rating %s -> partition %s, sort key %s", rating, key.partition_key, key.sort_key)
    return key
