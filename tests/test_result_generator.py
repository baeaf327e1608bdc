# tests/test_result_generator.py
"""
Result generation over the built-in and custom catalogs.

Usage:
    pytest -q tests/test_result_generator.py
"""
import pytest

from lab_service.environment import environment
from lab_service.modules.result_generator.sampling import sampling_window
from lab_service.modules.result_generator.service import (
    ResultGenerator,
    generate_results_for_test,
)
from lab_service.modules.test_catalog.const import TEST_DEFINITIONS
from lab_service.modules.test_catalog.service import (
    TestCatalog,
    get_default_catalog,
)


def midpoint(a, b):
    return (a + b) / 2


@pytest.fixture
def generator():
    return ResultGenerator(get_default_catalog())


# --------------------------------------------------------------------------- panels
@pytest.mark.parametrize("test_id", list(TEST_DEFINITIONS))
def test_every_panel_keeps_field_count_and_order(generator, test_id):
    result_set = generator.generate(test_id)
    declared = TEST_DEFINITIONS[test_id]
    assert result_set is not None
    assert result_set.display_name == declared["displayName"]
    assert [f.name for f in result_set.fields] == [
        f["name"] for f in declared["fields"]
    ]


@pytest.mark.parametrize("test_id", ["Nonexistent Panel", "cbc", ""])
def test_unknown_test_returns_none(generator, test_id):
    assert generator.generate(test_id) is None


def test_quantitative_values_stay_in_window(generator):
    catalog = get_default_catalog()
    for _ in range(50):
        for definition in catalog:
            result_set = generator.generate(definition.test_id)
            for spec, field in zip(definition.fields, result_set.fields):
                if spec.kind != "quantitative":
                    continue
                low, high = sampling_window(spec.ref_low, spec.ref_high)
                assert low - 0.05 <= field.value <= high + 0.05, field
                assert round(field.value, 1) == field.value


def test_quantitative_value_comes_from_sampling_window():
    generator = ResultGenerator(get_default_catalog(), uniform=lambda a, b: a)
    hemoglobin = generator.generate("CBC").fields[0]
    assert hemoglobin.value == 11.6
    assert hemoglobin.reference == "12 - 16"
    assert hemoglobin.unit == "g/dL"


def test_reference_strings_use_natural_numbers(generator):
    cbc = generator.generate("CBC")
    assert [f.reference for f in cbc.fields] == [
        "12 - 16",
        "4 - 5.5",
        "4 - 11",
        "150 - 450",
    ]


def test_urinalysis_qualitative_fields_echo_expected_text(generator):
    urinalysis = generator.generate("Urinalysis")
    appearance, ph, protein, glucose = urinalysis.fields

    assert (appearance.value, appearance.reference, appearance.unit) == (
        "Clear",
        "Clear",
        "",
    )
    assert (protein.value, protein.reference) == ("Negative", "Negative")
    assert (glucose.value, glucose.reference) == ("Negative", "Negative")

    assert ph.unit == ""
    assert ph.reference == "5 - 8"
    assert isinstance(ph.value, float)


def test_blood_glucose_scenario():
    result_set = ResultGenerator(get_default_catalog(), uniform=midpoint).generate(
        "Blood Glucose"
    )
    assert result_set.display_name == "Blood Glucose"
    fasting, random_glucose = result_set.fields

    assert fasting.name == "Fasting Glucose"
    assert fasting.unit == "mg/dL"
    assert fasting.reference == "70 - 100"
    assert fasting.value == 85.0

    assert random_glucose.name == "Random Glucose"
    assert random_glucose.reference == "70 - 140"
    assert random_glucose.value == 105.0


def test_structure_is_stable_across_calls(generator):
    def structure(result_set):
        return [(f.name, f.unit, f.reference) for f in result_set.fields]

    first = generator.generate("Liver Function Test")
    for _ in range(10):
        assert structure(generator.generate("Liver Function Test")) == structure(first)


# --------------------------------------------------------------------------- custom catalogs
def test_unresolvable_field_reports_not_available():
    catalog = TestCatalog.from_definitions(
        {"Draft": {"displayName": "Draft Panel", "fields": [{"name": "Mystery", "unit": "mg"}]}}
    )
    (field,) = ResultGenerator(catalog).generate("Draft").fields
    assert (field.name, field.unit, field.value, field.reference) == (
        "Mystery",
        "mg",
        "N/A",
        "N/A",
    )


def test_display_name_falls_back_to_test_id():
    catalog = TestCatalog.from_definitions(
        {"Ferritin": {"fields": [{"name": "Ferritin", "refLow": 20, "refHigh": 200}]}}
    )
    assert ResultGenerator(catalog).generate("Ferritin").display_name == "Ferritin"


def test_empty_panel_is_not_absent():
    catalog = TestCatalog.from_definitions({"Empty": {"displayName": "Empty", "fields": []}})
    result_set = ResultGenerator(catalog).generate("Empty")
    assert result_set is not None
    assert result_set.fields == []


def test_collapsed_and_inverted_ranges():
    catalog = TestCatalog.from_definitions(
        {
            "Edge": {
                "displayName": "Edge",
                "fields": [
                    {"name": "Zero", "refLow": 0, "refHigh": 0},
                    {"name": "Inverted", "refLow": 10, "refHigh": 5},
                ],
            }
        }
    )
    zero, inverted = ResultGenerator(catalog, uniform=lambda a, b: a).generate("Edge").fields
    assert zero.value == 0
    assert zero.reference == "0 - 0"
    assert inverted.value == 10.5
    assert inverted.reference == "10 - 5"


def test_module_level_generate_uses_default_catalog():
    result_set = generate_results_for_test("Thyroid Panel")
    assert [f.name for f in result_set.fields] == ["TSH", "Free T3", "Free T4"]
    assert generate_results_for_test("Nonexistent Panel") is None


# --------------------------------------------------------------------------- configuration
def test_configured_seed_makes_values_reproducible(monkeypatch):
    monkeypatch.setattr(environment, "result_seed", 7)
    catalog = get_default_catalog()

    def values(result_set):
        return [f.value for f in result_set.fields]

    first = ResultGenerator(catalog).generate("CBC")
    second = ResultGenerator(catalog).generate("CBC")
    assert values(first) == values(second)
