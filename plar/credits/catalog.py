"""Syllabus catalog loader.

Reads a YAML catalog document and validates it into a SyllabusCatalog.
Expected shape:

    name: ME-IR Training
    categories: [vfr_dual, ifr_dual, sim]
    requirements: {vfr_dual: 250, ifr_dual: 3000}
    phases:
      - id: phase1
        name: Phase 1 - BIFM
        events:
          - {id: inst01, name: INST 01, minutes: {ifr_dual: 90}}

No session state here - pure parsing and validation.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from plar.credits.errors import CatalogError
from plar.credits.types import SyllabusCatalog


def parse_catalog(data: Any) -> SyllabusCatalog:
    """Validate raw catalog data.

    Args:
        data: Parsed YAML/JSON structure

    Returns:
        Validated catalog

    Raises:
        CatalogError: If the structure or any value is invalid
    """
    if not isinstance(data, dict):
        raise CatalogError("INVALID_CATALOG", ["catalog document must be a mapping"])

    try:
        return SyllabusCatalog.model_validate(data)
    except ValidationError as e:
        details = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise CatalogError("INVALID_CATALOG", details) from e


def load_catalog(path: Path | str) -> SyllabusCatalog:
    """Load and validate a YAML catalog file.

    Raises:
        CatalogError: If the file is missing, is not valid YAML, or fails validation
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise CatalogError("INVALID_CATALOG", [f"catalog file not found: {catalog_path}"])

    try:
        with catalog_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError("INVALID_CATALOG", [f"invalid YAML in {catalog_path}: {e}"]) from e

    catalog = parse_catalog(data)
    logger.info(f"Loaded catalog '{catalog.name}' from {catalog_path} ({len(catalog.phases)} phases)")
    return catalog
