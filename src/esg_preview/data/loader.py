# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Supplier record loader for JSON, YAML, and CSV files.

JSON and YAML files may hold a single record (a mapping) or a list of
records.  CSV files hold one record per row under a header line; empty
cells are treated as missing and ``true``/``false`` cells become
booleans, since CSV carries no types of its own.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from esg_preview.data.models import SupplierMetrics

logger = logging.getLogger(__name__)

_BOOLEAN_CELLS = {
    "true": True,
    "yes": True,
    "false": False,
    "no": False,
}


class MetricsFileError(ValueError):
    """Raised when a metrics file cannot be read into supplier records."""


def load_records(path: str | Path) -> list[SupplierMetrics]:
    """Read every supplier record from *path*.

    Raises ``FileNotFoundError`` when the file does not exist and
    :class:`MetricsFileError` for unsupported or malformed content.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"Metrics file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        raw_records = _read_csv(file_path)
    elif suffix == ".json":
        raw_records = _read_json(file_path)
    elif suffix in (".yaml", ".yml"):
        raw_records = _read_yaml(file_path)
    else:
        raise MetricsFileError(f"Unsupported file type: {file_path.suffix or file_path.name}")

    records: list[SupplierMetrics] = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(SupplierMetrics.model_validate(raw))
        except ValidationError as exc:
            raise MetricsFileError(f"Invalid record {index} in {file_path}: {exc}") from exc

    logger.info("Loaded %d supplier record(s) from %s", len(records), file_path)
    return records


# ---------------------------------------------------------------------------
# Format readers
# ---------------------------------------------------------------------------

def _as_record_list(data: Any, file_path: Path) -> list[dict[str, Any]]:
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise MetricsFileError(
                    f"Record {index} in {file_path} is not a mapping"
                )
        return data
    raise MetricsFileError(
        f"{file_path} must contain a record or a list of records"
    )


def _read_json(file_path: Path) -> list[dict[str, Any]]:
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise MetricsFileError(f"Malformed JSON in {file_path}: {exc}") from exc
    return _as_record_list(data, file_path)


def _read_yaml(file_path: Path) -> list[dict[str, Any]]:
    try:
        with open(file_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise MetricsFileError(f"Malformed YAML in {file_path}: {exc}") from exc
    return _as_record_list(data, file_path)


def _read_csv(file_path: Path) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames:
            raise MetricsFileError(f"CSV file has no header row: {file_path}")
        for line_no, row in enumerate(reader, start=2):
            record = {
                key.strip(): _parse_cell(value)
                for key, value in row.items()
                if key and value is not None and value.strip() != ""
            }
            if not record:
                logger.warning("Skipping empty row %d in %s", line_no, file_path)
                continue
            records.append(record)
    return records


def _parse_cell(value: str) -> Any:
    text = value.strip()
    return _BOOLEAN_CELLS.get(text.lower(), text)
