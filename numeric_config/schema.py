"""
Field format catalogue schema.

A catalogue is the human-authored, reviewable list of numeric fields on one
document type together with their N(m.k) formats. YAML files are parsed
into these types by the loader.
"""

from __future__ import annotations

from dataclasses import dataclass

from numeric_kernel.domain.document_validator import FieldRule
from numeric_kernel.domain.number_format import NumberFormat
from numeric_kernel.exceptions import FieldNotInCatalogueError


@dataclass(frozen=True)
class FieldFormatDef:
    """One numeric field of a document and its format."""

    name: str
    number_format: NumberFormat
    required: bool = True
    description: str = ""

    def to_rule(self) -> FieldRule:
        return FieldRule(
            name=self.name,
            number_format=self.number_format,
            required=self.required,
        )


@dataclass(frozen=True)
class FieldFormatCatalogue:
    """
    Complete set of field formats for one document type.

    Guarantees:
        - field names are unique
        - checksum identifies the source YAML content
    """

    catalogue_id: str
    version: int
    fields: tuple[FieldFormatDef, ...]
    checksum: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(
                    f"Duplicate field '{f.name}' in catalogue '{self.catalogue_id}'"
                )
            seen.add(f.name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def get(self, field_name: str) -> FieldFormatDef:
        """Look up a field definition by name."""
        for f in self.fields:
            if f.name == field_name:
                return f
        raise FieldNotInCatalogueError(self.catalogue_id, field_name)

    def rules(self) -> tuple[FieldRule, ...]:
        return tuple(f.to_rule() for f in self.fields)
