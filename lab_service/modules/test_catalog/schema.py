from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class QualitativeField(BaseModel):
    """Field whose expected result is a fixed text, e.g. "Clear"."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["qualitative"] = "qualitative"
    name: str
    unit: str | None = None
    ref_text: str


class QuantitativeField(BaseModel):
    """Field with a numeric reference range.

    ``ref_low`` is not required to be below ``ref_high``; inverted ranges are
    kept as declared.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["quantitative"] = "quantitative"
    name: str
    unit: str | None = None
    ref_low: float
    ref_high: float


class UnresolvableField(BaseModel):
    """Field declared without a reference text or numeric bounds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unresolvable"] = "unresolvable"
    name: str
    unit: str | None = None


FieldSpec = Annotated[
    Union[QualitativeField, QuantitativeField, UnresolvableField],
    Field(discriminator="kind"),
]


class TestDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    test_id: str = Field(..., description="Catalog key of the panel, e.g. CBC")
    display_name: str | None = Field(
        None, description="Human readable panel name shown on reports"
    )
    fields: tuple[FieldSpec, ...] = Field(
        default_factory=tuple, description="Panel fields in report order"
    )


class TestSummary(BaseModel):
    test_id: str
    display_name: str
