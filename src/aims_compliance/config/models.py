"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. The reference
lists (antipsychotic names, active prescription status codes) live here as
plain data so a site can extend them from YAML without touching code.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_MEASUREMENT_DATE = date(2025, 5, 12)

ACTIVE_STATUS_CODES = [
    "A", "C", "CC", "EC", "PC", "FC", "ECU", "PCU", "ECCF", "ECUCF",
    "ECDP", "ECUDP", "IPEC", "IPECU", "IPECDP", "IPECUDP",
]

# Generic and brand names, long-acting injectables included. Matching is a
# case-insensitive substring test against the free-text medication name.
ANTIPSYCHOTICS = [
    "Haloperidol", "Haldol",
    "Fluphenazine", "Prolixin",
    "Perphenazine", "Trilafon",
    "Thiothixene", "Navane",
    "Trifluoperazine", "Stelazine",
    "Pimozide", "Orap",
    "Loxapine", "Loxitane",
    "Molindone", "Moban",
    "Chlorpromazine", "Thorazine",
    "Thioridazine", "Mellaril",
    "Mesoridazine", "Serentil",
    "Acetophenazine", "Tindal",
    "Carphenazine", "Proketazine",
    "Clozapine", "Clozaril",
    "Risperidone", "Risperdal",
    "Paliperidone", "Invega",
    "Olanzapine", "Zyprexa",
    "Quetiapine", "Seroquel",
    "Ziprasidone", "Geodon",
    "Aripiprazole", "Abilify",
    "Asenapine", "Saphris",
    "Iloperidone", "Fanapt",
    "Lurasidone", "Latuda",
    "Brexpiprazole", "Rexulti",
    "Cariprazine", "Vraylar",
    "Lumateperone", "Caplyta",
    "Haloperidol decanoate", "Fluphenazine decanoate",
    "Risperidone microspheres", "Risperdal Consta",
    "Paliperidone palmitate", "Invega Sustenna",
    "Invega Trinza", "Aripiprazole lauroxil",
    "Aristada", "Aripiprazole monohydrate",
    "Abilify Maintena", "Olanzapine pamoate",
    "Zyprexa Relprevv",
]


class ReportSettings(BaseModel):
    """Report-level thresholds and labels."""

    default_measurement_date: date = Field(default=DEFAULT_MEASUREMENT_DATE)
    overdue_after_days: int = Field(default=180, ge=0)
    high_score_threshold: float = Field(default=4, ge=0)
    unassigned_prescriber_label: str = Field(default="Not Assigned", min_length=1)
    test_name_pattern: str = Field(default="test", min_length=1)


class ReferenceDataConfig(BaseModel):
    """Static reference sets used by the eligibility stage."""

    antipsychotics: List[str] = Field(
        default_factory=lambda: list(ANTIPSYCHOTICS), min_length=1
    )
    active_status_codes: List[str] = Field(
        default_factory=lambda: list(ACTIVE_STATUS_CODES), min_length=1
    )
    active_client_status: str = Field(default="Active", min_length=1)

    @field_validator("antipsychotics")
    @classmethod
    def _strip_blank_names(cls, value: List[str]) -> List[str]:
        names = [name.strip() for name in value if name and name.strip()]
        if not names:
            raise ValueError("antipsychotics must contain at least one name")
        return names


class DatabaseConfig(BaseModel):
    """Source database location and table names."""

    url: Optional[str] = Field(default=None)
    schema_name: Optional[str] = Field(default="dbo")
    clients_table: str = Field(default="Clients")
    medications_table: str = Field(default="Meds")
    employees_table: str = Field(default="Employees")
    client_extensions_table: str = Field(default="ClientsExt")
    echo: bool = False


class ValidationConfig(BaseModel):
    """Request validation limits."""

    max_future_days: int = Field(default=366, ge=0)


class ReportConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    report: ReportSettings = Field(default_factory=ReportSettings)
    reference_data: ReferenceDataConfig = Field(default_factory=ReferenceDataConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    model_config = {"populate_by_name": True}
