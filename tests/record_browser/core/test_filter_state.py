from __future__ import annotations

from record_browser.core.filter_state import FilterCriteria, normalise_term


def test_normalise_term_trims_and_casefolds():
    assert normalise_term("  ABC ") == "abc"
    assert normalise_term(None) == ""
    assert normalise_term("   ") == ""


def test_criteria_normalised_and_is_empty():
    crit = FilterCriteria(group_name="  Nhóm ", name="", code="SP0")
    n = crit.normalised()

    assert n == FilterCriteria(group_name="nhóm", name="", code="sp0")
    assert not crit.is_empty
    assert FilterCriteria(group_name="  ", name="\t").is_empty


def test_criteria_to_from_dict_roundtrip():
    crit = FilterCriteria(group_name="a", name="b", code="c")

    assert FilterCriteria.from_dict(crit.to_dict()) == crit


def test_from_dict_tolerates_missing_and_none_values():
    assert FilterCriteria.from_dict(None) == FilterCriteria()
    assert FilterCriteria.from_dict({"name": None, "code": "x"}) == FilterCriteria(code="x")
