"""Random sample data for person records."""
from __future__ import annotations

import random
import string

LETTERS = string.ascii_uppercase + string.ascii_lowercase
NAME_LENGTH = 5
SURNAME_LENGTH = 8
MAX_AGE = 100
MAX_PASSPORT = 100_000
DEFAULT_SEX = "Male"


def random_letters(length: int, rng: random.Random) -> str:
    """Return ``length`` characters drawn uniformly from A-Z and a-z."""
    if length < 0:
        raise ValueError("length must be >= 0")
    return "".join(rng.choice(LETTERS) for _ in range(length))


def random_person_fields(rng: random.Random) -> dict[str, int | str]:
    """Field values for one sample person, keyed like the Person columns."""
    return {
        "number_passport": rng.randrange(MAX_PASSPORT),
        "name": random_letters(NAME_LENGTH, rng),
        "surname": random_letters(SURNAME_LENGTH, rng),
        "age": rng.randrange(MAX_AGE),
        "sex": DEFAULT_SEX,
    }
