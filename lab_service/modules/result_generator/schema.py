from pydantic import BaseModel, Field


class GeneratedField(BaseModel):
    name: str = Field(..., description="Name of the panel field")
    unit: str = Field("", description="Unit of the value, empty when unitless")
    value: float | str = Field(
        ..., description="Sampled number, the fixed expected text, or N/A"
    )
    reference: str = Field(
        ..., description='Reference range as "low - high", fixed text, or N/A'
    )


class GeneratedResultSet(BaseModel):
    display_name: str = Field(..., description="Display name of the panel")
    fields: list[GeneratedField] = Field(default_factory=list)
