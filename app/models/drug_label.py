from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class OpenFdaIdentity(BaseModel):
    model_config = ConfigDict(extra="ignore")

    brand_name: Optional[List[str]] = Field(None, description="Brand names of the drug")
    generic_name: Optional[List[str]] = Field(None, description="Generic names of the drug")
    manufacturer_name: Optional[List[str]] = Field(None, description="Manufacturer names (not displayed)")

class LabelRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, description="openFDA label identifier")
    indications_and_usage: Optional[List[str]] = Field(None, description="Indications and usage sections")
    warnings: Optional[List[str]] = Field(None, description="Warnings sections")
    adverse_reactions: Optional[List[str]] = Field(None, description="Adverse reactions sections")
    dosage_and_administration: Optional[List[str]] = Field(None, description="Dosage and administration sections")
    openfda: Optional[OpenFdaIdentity] = Field(None, description="Harmonized openFDA identity fields")

class DrugLabelResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: List[LabelRecord] = Field(default_factory=list, description="Matching label records, most relevant first")

    def first(self) -> Optional[LabelRecord]:
        return self.results[0] if self.results else None

class DisplayModel(BaseModel):
    drug_name: str = Field(..., description="Brand name, generic name or the unknown placeholder")
    benefits: str = Field(..., description="Indications and usage text")
    side_effects: str = Field(..., description="Warnings followed by adverse reactions")
    dosage: str = Field(..., description="Dosage and administration text")
    when_to_take: str = Field(..., description="Dosage text or the consult-a-physician advisory")

class SearchOutcome(BaseModel):
    status: str = Field(..., description="success, no_results, error or invalid_input")
    query: str = Field(..., description="Trimmed drug name that was searched")
    message: str = Field("", description="Status line shown to the user; empty on success")
    label: Optional[DisplayModel] = Field(None, description="Display fields, present only on success")
