"""
Phrase Pair Data Module
Loads the reference / flawed-variant phrase pairs the game draws rounds from.
"""

import json
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

DATA_DIR = Path(__file__).resolve().parent / "data"
PHRASE_PAIRS_FILE = DATA_DIR / "phrase_pairs.json"


@dataclass(frozen=True)
class PhrasePair:
    """A correct French phrase and the deliberately flawed version shown to players."""
    id: str
    reference: str
    flawed_variant: str
    topic: str = ""


def load_phrase_pairs(path: Optional[Union[str, Path]] = None) -> List[PhrasePair]:
    """Load phrase pairs from a JSON file ({"pairs": [...]}); [] if the file is absent."""
    path = Path(path) if path else PHRASE_PAIRS_FILE
    if not path.exists():
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [
        PhrasePair(
            id=str(item["id"]),
            reference=item["reference"],
            flawed_variant=item["flawed_variant"],
            topic=item.get("topic", ""),
        )
        for item in data.get("pairs", [])
    ]


def get_random_pair(
    rng: Optional[random.Random] = None, path: Optional[Union[str, Path]] = None
) -> Optional[PhrasePair]:
    """Get a random phrase pair from the available set."""
    pairs = load_phrase_pairs(path)
    if not pairs:
        return None
    return (rng or random).choice(pairs)


def get_pair_by_id(pair_id: str, path: Optional[Union[str, Path]] = None) -> Optional[PhrasePair]:
    """Get a specific phrase pair by ID."""
    for pair in load_phrase_pairs(path):
        if pair.id == pair_id:
            return pair
    return None
