"""
Computed value types for APML IR.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ComputedFormat(StrEnum):
    """Display formats a computed value can request."""

    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    NUMBER = "number"
    DATE = "date"
    TIMESTAMP = "timestamp"
    DURATION = "duration"


class ComputedValue(BaseModel):
    """
    A ``computed <Name>`` declaration.

    Inline form sets ``expression``; block form sets ``value`` (possibly a
    multi-line literal) and optionally ``format`` and ``cache``. Expression
    text is opaque: it is never evaluated or type-checked here.

    Examples:
        - computed total: a + b -> ComputedValue(name="total", expression="a + b")
        - computed total:
            value: a + b       -> ComputedValue(name="total", value="a + b")
    """

    name: str
    expression: str | None = None
    value: str | None = None
    format: ComputedFormat | None = None
    cache: bool | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def source(self) -> str | None:
        """The expression text regardless of which syntax declared it."""
        return self.expression if self.expression is not None else self.value
