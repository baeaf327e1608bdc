"""
Result Generator
----------------

Fabricates one plausible value per field of a catalog panel.

* qualitative fields echo their expected text
* quantitative fields are sampled around the reference range (see sampling.py)
* fields without reference data come back as "N/A"

Unknown test identifiers return None so callers can tell "not found" apart
from an empty panel.
"""

import random
from functools import lru_cache

from loguru import logger

from lab_service.environment import environment
from lab_service.modules.result_generator.sampling import (
    Uniform,
    format_reference,
    sample,
)
from lab_service.modules.result_generator.schema import (
    GeneratedField,
    GeneratedResultSet,
)
from lab_service.modules.test_catalog.schema import (
    FieldSpec,
    QualitativeField,
    QuantitativeField,
    UnresolvableField,
)
from lab_service.modules.test_catalog.service import (
    TestCatalog,
    get_default_catalog,
)

NOT_AVAILABLE = "N/A"


def _default_uniform() -> Uniform:
    if environment.result_seed is not None:
        return random.Random(environment.result_seed).uniform
    return random.uniform


class ResultGenerator:
    def __init__(self, catalog: TestCatalog, uniform: Uniform | None = None):
        self.catalog = catalog
        self.uniform = uniform or _default_uniform()

    def generate_field(self, field: FieldSpec) -> GeneratedField:
        unit = field.unit or ""
        if isinstance(field, QualitativeField):
            return GeneratedField(
                name=field.name,
                unit=unit,
                value=field.ref_text,
                reference=field.ref_text,
            )
        if isinstance(field, QuantitativeField):
            return GeneratedField(
                name=field.name,
                unit=unit,
                value=sample(field.ref_low, field.ref_high, self.uniform),
                reference=format_reference(field.ref_low, field.ref_high),
            )
        if isinstance(field, UnresolvableField):
            return GeneratedField(
                name=field.name,
                unit=unit,
                value=NOT_AVAILABLE,
                reference=NOT_AVAILABLE,
            )
        raise TypeError(f"Unsupported field spec: {type(field).__name__}")

    def generate(self, test_id: str) -> GeneratedResultSet | None:
        definition = self.catalog.lookup(test_id)
        if definition is None:
            logger.warning(f"No test definition found for {test_id!r}.")
            return None

        result_set = GeneratedResultSet(
            display_name=definition.display_name or test_id,
            fields=[self.generate_field(field) for field in definition.fields],
        )
        logger.debug(
            f"Generated {len(result_set.fields)} results for {test_id!r}."
        )
        return result_set


@lru_cache(maxsize=1)
def get_default_generator() -> ResultGenerator:
    return ResultGenerator(get_default_catalog())


def generate_results_for_test(test_id: str) -> GeneratedResultSet | None:
    return get_default_generator().generate(test_id)
