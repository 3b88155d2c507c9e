"""
Reads part lists from CSV or JSON files.
"""
import csv
import json
import logging
import os
from typing import Any, Dict, List

from cutplan import config
from cutplan.exceptions import PartsFileError
from cutplan.models.part import GrainConstraint, PartSpec

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'width', 'height')


def _number(row: Dict[str, Any], field: str, where: str) -> float:
    value = row.get(field)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise PartsFileError(f"{where}: {field} must be a number, got {value!r}") from None


def _quantity(row: Dict[str, Any], where: str) -> int:
    value = row.get('quantity')
    if value is None or value == '':
        return 1
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        raise PartsFileError(f"{where}: quantity must be a whole number, got {value!r}") from None
    if not quantity.is_integer():
        raise PartsFileError(f"{where}: quantity must be a whole number, got {value!r}")
    return int(quantity)


def part_from_row(row: Dict[str, Any], default_id: str, where: str) -> PartSpec:
    row = {str(key).strip().lower(): value.strip() if isinstance(value, str) else value
           for key, value in row.items() if key is not None}
    missing = [field for field in REQUIRED_FIELDS if row.get(field) in (None, '')]
    if missing:
        raise PartsFileError(f"{where}: missing {', '.join(missing)}")
    try:
        grain = GrainConstraint.parse(row.get('grain') or GrainConstraint.FREE)
    except ValueError as e:
        raise PartsFileError(f"{where}: {e}") from None
    return PartSpec(
        part_id=str(row.get('id') or default_id),
        name=str(row['name']).strip(),
        width=_number(row, 'width', where),
        height=_number(row, 'height', where),
        quantity=_quantity(row, where),
        grain=grain,
        material=str(row.get('material') or config.DEFAULT_MATERIAL),
        cabinet_id=row.get('cabinet') or row.get('cabinet_id') or None
    )


def load_parts(path: str) -> List[PartSpec]:
    """Load part specifications from a ``.csv`` or ``.json`` file."""
    stem, ext = os.path.splitext(os.path.basename(path))
    ext = ext.lower()
    try:
        with open(path, newline='', encoding='utf-8') as f:
            if ext == '.csv':
                rows = list(csv.DictReader(f))
                first_row = 2
            elif ext == '.json':
                data = json.load(f)
                rows = data.get('parts', []) if isinstance(data, dict) else data
                first_row = 1
            else:
                raise PartsFileError(f"{path}: unsupported file type {ext!r} (use .csv or .json)")
    except OSError as e:
        raise PartsFileError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise PartsFileError(f"{path}: not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise PartsFileError(f"{path}: invalid JSON: {e}") from e

    if not isinstance(rows, list):
        raise PartsFileError(f"{path}: expected a list of parts")
    parts = []
    for offset, row in enumerate(rows):
        where = f"{path}:{first_row + offset}"
        if not isinstance(row, dict):
            raise PartsFileError(f"{where}: expected an object, got {type(row).__name__}")
        parts.append(part_from_row(row, f"{stem}-{offset + 1}", where))
    logger.debug("Loaded %d part(s) from %s", len(parts), path)
    return parts
