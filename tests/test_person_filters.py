from __future__ import annotations

from types import SimpleNamespace

from api.domain.person_filters import (
    Condition,
    FilterCriteria,
    build_conditions,
    matches,
    normalize_direction,
    sort_attribute,
)


def _record(**kw):
    base = {"id": 1, "number_passport": 100, "name": "Anna", "surname": "Smith", "age": 30, "sex": "Female"}
    base.update(kw)
    return SimpleNamespace(**base)


def test_no_criteria_matches_everything():
    conditions = build_conditions(FilterCriteria())
    assert conditions == []
    assert matches(conditions, _record())
    assert matches(conditions, _record(age=None, name=None))


def test_paging_fields_do_not_produce_conditions():
    criteria = FilterCriteria(page=3, size=50, sort_field="age", sort_direction="desc")
    assert build_conditions(criteria) == []


def test_every_supplied_criterion_becomes_a_condition():
    criteria = FilterCriteria(
        number_passport=7,
        name="Anna",
        surname="Smith",
        age=30,
        sex="Female",
        start_age=18,
        finish_age=65,
    )
    assert build_conditions(criteria) == [
        Condition("number_passport", "eq", 7),
        Condition("name", "eq", "Anna"),
        Condition("surname", "eq", "Smith"),
        Condition("age", "eq", 30),
        Condition("sex", "eq", "Female"),
        Condition("age", "ge", 18),
        Condition("age", "le", 65),
    ]


def test_empty_strings_and_zero_values():
    conditions = build_conditions(FilterCriteria(name="", sex="", age=0, start_age=0))
    # blank text is "not supplied"; zero is a real value
    assert conditions == [Condition("age", "eq", 0), Condition("age", "ge", 0)]


def test_exact_match_is_case_sensitive_and_not_substring():
    conditions = build_conditions(FilterCriteria(name="Anna"))
    assert matches(conditions, _record(name="Anna"))
    assert not matches(conditions, _record(name="anna"))
    assert not matches(conditions, _record(name="Annabel"))


def test_age_bounds_are_inclusive_and_independent():
    both = build_conditions(FilterCriteria(start_age=20, finish_age=30))
    assert [matches(both, _record(age=a)) for a in (19, 20, 25, 30, 31)] == [False, True, True, True, False]

    lower_only = build_conditions(FilterCriteria(start_age=50))
    assert matches(lower_only, _record(age=99))
    assert not matches(lower_only, _record(age=49))

    upper_only = build_conditions(FilterCriteria(finish_age=10))
    assert matches(upper_only, _record(age=0))
    assert not matches(upper_only, _record(age=11))


def test_all_criteria_are_anded():
    conditions = build_conditions(FilterCriteria(sex="Male", start_age=18))
    assert matches(conditions, _record(sex="Male", age=18))
    assert not matches(conditions, _record(sex="Male", age=17))
    assert not matches(conditions, _record(sex="Female", age=40))


def test_sort_attribute_accepts_wire_and_python_names():
    assert sort_attribute("numberPassport") == "number_passport"
    assert sort_attribute("number_passport") == "number_passport"
    assert sort_attribute("id") == "id"
    assert sort_attribute("age") == "age"
    assert sort_attribute("password") is None
    assert sort_attribute("") is None
    assert sort_attribute(None) is None


def test_normalize_direction_is_case_insensitive():
    assert normalize_direction("asc") == "asc"
    assert normalize_direction("DESC") == "desc"
    assert normalize_direction(" Asc ") == "asc"
    assert normalize_direction("up") is None
    assert normalize_direction(None) is None
