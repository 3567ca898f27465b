"""
numeric_config -- single public entrypoint for field format catalogues.

Responsibility:
    Provides the ONLY way to obtain field format configuration at runtime
    through ``get_field_catalogue()``. YAML loading is internal tooling.

Architecture position:
    This package sits above ``numeric_kernel``. The kernel MUST NEVER import
    from ``numeric_config``; the catalogue hands the kernel plain
    ``FieldRule`` objects.

Failure modes:
    - ``FileNotFoundError`` -- no catalogue file for the requested id.
    - ``ValueError`` -- catalogue id mismatch or duplicate field names.
    - ``ConfigurationError`` subclasses -- invalid field formats.

Audit relevance:
    Every successful ``get_field_catalogue()`` call emits a
    ``NUMERIC_CONFIG_TRACE`` log entry with the catalogue id, version,
    checksum and field count.
"""

from __future__ import annotations

from pathlib import Path

from numeric_config.loader import load_catalogue
from numeric_config.schema import FieldFormatCatalogue, FieldFormatDef
from numeric_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default catalogue directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"


def get_field_catalogue(
    catalogue_id: str,
    config_dir: Path | None = None,
) -> FieldFormatCatalogue:
    """The ONLY public configuration entrypoint.

    Args:
        catalogue_id: Catalogue to load; the file ``<catalogue_id>.yaml``.
        config_dir: Override for the catalogue directory (tests).

    Raises:
        FileNotFoundError: No catalogue file for ``catalogue_id``.
        ValueError: The file declares a different catalogue id.
    """
    base_dir = config_dir or _DEFAULT_CONFIG_DIR
    path = base_dir / f"{catalogue_id}.yaml"
    if not path.is_file():
        raise FileNotFoundError(
            f"No field format catalogue '{catalogue_id}' in {base_dir}"
        )

    catalogue = load_catalogue(path)
    if catalogue.catalogue_id != catalogue_id:
        raise ValueError(
            f"Catalogue file {path} declares id '{catalogue.catalogue_id}', "
            f"expected '{catalogue_id}'"
        )

    _logger.info(
        "NUMERIC_CONFIG_TRACE",
        extra={
            "trace_type": "NUMERIC_CONFIG_TRACE",
            "catalogue_id": catalogue.catalogue_id,
            "catalogue_version": catalogue.version,
            "checksum": catalogue.checksum,
            "field_count": len(catalogue.fields),
        },
    )
    return catalogue


__all__ = [
    "FieldFormatCatalogue",
    "FieldFormatDef",
    "get_field_catalogue",
]
