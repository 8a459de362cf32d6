from __future__ import annotations

import random
from dataclasses import dataclass

ITEMS: tuple[str, ...] = (
    "apple",
    "bird",
    "elephant",
    "car",
    "star",
    "bear",
    "flower",
    "duck",
    "fish",
    "cat",
    "dog",
    "ball",
)


@dataclass(frozen=True)
class Round:
    """A single guess-the-number trial."""

    target_number: int
    options: tuple[int, ...]


def item_for_round(round_number: int) -> str:
    """Return the item shown in the given 1-based round, falling back to the first item."""
    index = round_number - 1
    if 0 <= index < len(ITEMS):
        return ITEMS[index]
    return ITEMS[0]


def generate_round(rng: random.Random, max_number: int = 12, option_count: int = 3) -> Round:
    """Draw a target in 1..max_number and a shuffled set of distinct options containing it."""
    if option_count > max_number:
        raise ValueError(f"cannot pick {option_count} distinct options from 1..{max_number}")
    target = rng.randint(1, max_number)
    picked = {target}
    while len(picked) < option_count:
        candidate = rng.randint(1, max_number)
        if candidate not in picked:
            picked.add(candidate)
    options = sorted(picked)
    rng.shuffle(options)
    return Round(target_number=target, options=tuple(options))
