import pytest
from janai.schemes.eligibility import check_eligibility


@pytest.mark.parametrize("scheme, profile, expected", [
    ({"category": "Social Security"}, {"age": "65"}, True),
    ({"category": "Social Security"}, {"age": "59"}, False),
    ({"category": "Agriculture"}, {"age": "40", "occupation": "Farmer"}, True),
    ({"category": "Agriculture"}, {"age": "40", "occupation": "Teacher"}, False),
    ({"category": "Education"}, {"age": "18"}, True),
    ({"category": "Education"}, {"age": "31"}, False),
    ({"category": "Housing", "targetGroup": "Below Poverty Line families"}, {"income": "120000"}, True),
    ({"category": "Housing", "targetGroup": "Below Poverty Line families"}, {"income": "300000"}, False),
])
def test_eligibility_rules(scheme, profile, expected):
    assert check_eligibility(scheme, profile) is expected


def test_no_profile_is_never_eligible():
    assert check_eligibility({"category": "Social Security"}, None) is False
    assert check_eligibility({"category": "Social Security"}, {}) is False


def test_unparseable_numbers_count_as_zero():
    # income "unknown" -> 0, which is under the BPL limit
    assert check_eligibility(
        {"category": "Housing", "targetGroup": "Below Poverty Line"},
        {"age": "n/a", "income": "unknown"},
    ) is True
    assert check_eligibility({"category": "Social Security"}, {"age": "sixty"}) is False


@pytest.mark.parametrize("age", ["60.5", "65 years", " 61", 65.0, 70])
def test_age_uses_leading_digits(age):
    assert check_eligibility({"category": "Social Security"}, {"age": age}) is True


def test_non_string_occupation_does_not_crash():
    assert check_eligibility({"category": "Agriculture"}, {"occupation": 42}) is False
