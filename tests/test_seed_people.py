from __future__ import annotations

import importlib.util
import random
import sys
from pathlib import Path

from api.domain.random_people import random_person_fields
from api.repositories.sql_repository import SQLRepository

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "seed_people.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_people", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_seed_script_creates_seeded_records(empty_db, monkeypatch, capsys):
    seed_people = _load_script()
    monkeypatch.setattr(sys, "argv", ["seed_people.py", "--count", "2", "--seed", "1"])

    seed_people.main()

    assert capsys.readouterr().out.strip() == "Successfully created: 2 records in the database"
    rng = random.Random(1)
    expected = [random_person_fields(rng) for _ in range(2)]
    stored = SQLRepository().list_persons()
    assert [(p.number_passport, p.name, p.surname, p.age, p.sex) for p in stored] == [
        (e["number_passport"], e["name"], e["surname"], e["age"], e["sex"]) for e in expected
    ]
