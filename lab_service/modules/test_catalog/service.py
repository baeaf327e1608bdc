"""
Test Catalog
------------

Read-only lookup table of laboratory panels. Raw entries use the legacy
shape (``refText`` / ``refLow`` / ``refHigh``) and are resolved into typed
field specs once, when the catalog is built.

Public API:
    TestCatalog.lookup(test_id) -> TestDefinition | None
    load_catalog_file(path) -> TestCatalog
    get_default_catalog() -> TestCatalog
"""

from __future__ import annotations

import math
from functools import lru_cache
from numbers import Real
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import yaml
from loguru import logger

from lab_service.environment import environment
from lab_service.modules.test_catalog.const import TEST_DEFINITIONS
from lab_service.modules.test_catalog.schema import (
    FieldSpec,
    QualitativeField,
    QuantitativeField,
    TestDefinition,
    TestSummary,
    UnresolvableField,
)


class CatalogFormatError(ValueError):
    """Raised when a catalog source does not have the expected structure."""


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def resolve_field_spec(raw: Mapping[str, Any]) -> FieldSpec:
    # precedence: reference text, then numeric bounds, then nothing usable
    name = raw.get("name")
    unit = raw.get("unit")
    ref_text = raw.get("refText")
    if isinstance(ref_text, str) and ref_text:
        return QualitativeField(name=name, unit=unit, ref_text=ref_text)

    ref_low = raw.get("refLow")
    ref_high = raw.get("refHigh")
    if _is_number(ref_low) and _is_number(ref_high):
        return QuantitativeField(
            name=name, unit=unit, ref_low=ref_low, ref_high=ref_high
        )

    logger.warning(f"Field {name!r} has no reference text or numeric bounds.")
    return UnresolvableField(name=name, unit=unit)


def resolve_test_definition(test_id: str, raw: Mapping[str, Any]) -> TestDefinition:
    if not isinstance(raw, Mapping):
        raise CatalogFormatError(f"Test {test_id!r} must be a mapping")
    raw_fields = raw.get("fields")
    if not isinstance(raw_fields, list):
        raise CatalogFormatError(f"Test {test_id!r} has no 'fields' list")
    fields = []
    for raw_field in raw_fields:
        if not isinstance(raw_field, Mapping):
            raise CatalogFormatError(
                f"Test {test_id!r} has a field that is not a mapping: {raw_field!r}"
            )
        fields.append(resolve_field_spec(raw_field))
    return TestDefinition(
        test_id=test_id,
        display_name=raw.get("displayName"),
        fields=tuple(fields),
    )


class TestCatalog:
    """Immutable mapping from test identifier to its panel definition."""

    __test__ = False

    def __init__(self, definitions: Mapping[str, TestDefinition]):
        self._definitions = MappingProxyType(dict(definitions))

    @classmethod
    def from_definitions(
        cls, raw_definitions: Mapping[str, Mapping[str, Any]]
    ) -> TestCatalog:
        return cls(
            {
                test_id: resolve_test_definition(test_id, raw)
                for test_id, raw in raw_definitions.items()
            }
        )

    def lookup(self, test_id: str) -> TestDefinition | None:
        """Exact, case-sensitive lookup. Unknown identifiers give None."""
        return self._definitions.get(test_id)

    def test_ids(self) -> list[str]:
        return list(self._definitions)

    def summaries(self) -> list[TestSummary]:
        return [
            TestSummary(test_id=test_id, display_name=d.display_name or test_id)
            for test_id, d in self._definitions.items()
        ]

    def __contains__(self, test_id: object) -> bool:
        return test_id in self._definitions

    def __iter__(self) -> Iterator[TestDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def load_catalog_file(path: str | Path) -> TestCatalog:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw_definitions = yaml.safe_load(f)
    if not isinstance(raw_definitions, dict):
        raise CatalogFormatError(f"{path} must contain a mapping of test definitions")
    catalog = TestCatalog.from_definitions(raw_definitions)
    logger.info(f"Loaded {len(catalog)} test definitions from {path}")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> TestCatalog:
    if environment.catalog_path:
        return load_catalog_file(environment.catalog_path)
    catalog = TestCatalog.from_definitions(TEST_DEFINITIONS)
    logger.info(f"Built-in test catalog ready with {len(catalog)} test definitions.")
    return catalog
