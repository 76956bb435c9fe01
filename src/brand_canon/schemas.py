from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field


# --- Inputs ---

class AliasEdge(BaseModel):
    """One manufacturer synonym record: ``primary`` is related to every ``secondary``."""

    primary: str
    secondary: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_row(cls, row: Any, delimiter: str = ";") -> AliasEdge | None:
        """Parse a raw connection row; ``None`` when either side is missing.

        Accepts ``{"manufacturer_p1", "manufacturers_p2"}`` as found in the
        connection export, or ``{"primary", "secondary"}``.
        """
        if not isinstance(row, dict):
            return None
        primary_raw = row.get("manufacturer_p1", row.get("primary"))
        secondary_raw = row.get("manufacturers_p2", row.get("secondary"))
        if primary_raw is None or secondary_raw is None:
            return None
        primary = str(primary_raw).strip()
        if isinstance(secondary_raw, (list, tuple)):
            pieces = [str(s) for s in secondary_raw if s is not None]
            present = bool(pieces)
        else:
            present = str(secondary_raw) != ""
            pieces = str(secondary_raw).split(delimiter)
        if not primary or not present:
            return None
        # A row like "foo" -> " " still registers foo as a singleton group.
        secondary = [p.strip() for p in pieces if p.strip()]
        return cls(primary=primary, secondary=secondary)


class Product(BaseModel):
    title: str
    source_id: str = ""
    mapping_id: str | None = None  # set once the product has been assigned

    model_config = {"frozen": True}


# --- Outputs ---

class MatchResult(BaseModel):
    title: str
    ordered_canonicals: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def chosen(self) -> str | None:
        return self.ordered_canonicals[0] if self.ordered_canonicals else None


class BrandCount(BaseModel):
    brand: str
    count: int


class BrandReport(BaseModel):
    total: int = 0
    assigned: int = 0
    unique_brands: int = 0
    by_brand: list[BrandCount] = Field(default_factory=list)
    rows: list[MatchResult] = Field(default_factory=list)


class BrandAssignment(BaseModel):
    key: str
    source: str
    country: str
    source_id: str
    title: str
    brand: str | None
    meta: dict[str, Any] = Field(default_factory=dict)
