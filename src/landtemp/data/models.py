# SPDX-License-Identifier: Apache-2.0
"""Immutable dataset models for the monthly temperature variance document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VarianceRecord(BaseModel):
    """Temperature deviation from the base temperature for one year/month."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    year: int
    month: int = Field(..., ge=1, le=12, description="Calendar month, 1-12")
    variance: float = Field(..., description="Delta from base temperature (℃)")

    @property
    def month_index(self) -> int:
        return self.month - 1

    def temperature(self, base_temperature: float) -> float:
        return base_temperature + self.variance


class Dataset(BaseModel):
    """Base temperature plus the ordered sequence of monthly variance records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)

    base_temperature: float = Field(..., alias="baseTemperature")
    monthly_variance: tuple[VarianceRecord, ...] = Field(
        default=(), alias="monthlyVariance"
    )

    @property
    def is_empty(self) -> bool:
        return not self.monthly_variance

    def years(self) -> list[int]:
        """Distinct years in first-seen order."""
        return list(dict.fromkeys(r.year for r in self.monthly_variance))

    def year_span(self) -> tuple[int, int] | None:
        """First and last year as they appear in the sequence."""
        if self.is_empty:
            return None
        return self.monthly_variance[0].year, self.monthly_variance[-1].year
