"""Record loading and form input adaptation.

Reads the reference dinosaur records from JSON and builds Dinosaur
entities from them, and turns the raw form values into a Human.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from infographic.src.models import Dinosaur, Human, make_dinosaur, make_human
from shared.hardening import InputValidator

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "dino.json"
DATA_PATH_ENV = "DINO_DATA_PATH"
RECORDS_KEY = "Dinos"


class RecordFileError(ValueError):
    """Raised when a record file cannot be read as dinosaur records."""


def resolve_data_path(path: str | Path | None = None) -> Path:
    """Pick the record file: argument, then environment, then bundled data."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(DATA_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_DATA_PATH


def load_dinosaur_records(path: str | Path | None = None) -> list[dict[str, Any]]:
    """Read raw dinosaur records from a JSON file.

    The file holds an object with the record list under ``"Dinos"``.

    Args:
        path: Record file. See ``resolve_data_path`` for the default.

    Returns:
        Raw records, in file order.

    Raises:
        ValidationError: If the path is unsafe, missing, or not ``.json``.
        RecordFileError: If the content is not UTF-8 JSON holding a list
            of record objects.
    """
    validated = InputValidator().validate_file_path(
        resolve_data_path(path), must_exist=True, allowed_extensions=(".json",)
    )
    try:
        with open(validated, encoding="utf-8") as fh:
            data = json.load(fh)
    except UnicodeDecodeError as exc:
        raise RecordFileError(f"{validated.name} is not valid UTF-8 text") from exc
    except json.JSONDecodeError as exc:
        raise RecordFileError(f"Invalid JSON in {validated.name}") from exc

    if not isinstance(data, dict) or not isinstance(data.get(RECORDS_KEY), list):
        raise RecordFileError(f"Expected a '{RECORDS_KEY}' list in {validated.name}")

    records = data[RECORDS_KEY]
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            raise RecordFileError(f"Record {idx + 1} is not a JSON object")
    return records


def load_dinosaurs(path: str | Path | None = None) -> list[Dinosaur]:
    """Build Dinosaur entities from a record file.

    Raises:
        MissingAttributeError: If a record lacks a required field.
    """
    dinosaurs = [make_dinosaur(record) for record in load_dinosaur_records(path)]
    logger.info("Loaded %d dinosaurs", len(dinosaurs))
    return dinosaurs


def height_in_inches(feet: int, inches: float) -> float:
    """Total height in inches from the form's feet and inches fields."""
    return inches + feet * 12


def human_from_form(
    name: str,
    feet: int,
    inches: float,
    weight: float,
    diet: str,
) -> Human:
    """Build a Human from raw form values.

    Args:
        name: Display name.
        feet: Whole feet of height.
        inches: Remaining inches of height.
        weight: Weight in pounds.
        diet: One of the ``Diet`` values.

    Returns:
        The Human, with height in inches.
    """
    return make_human(
        {
            "name": name,
            "height": height_in_inches(feet, inches),
            "weight": weight,
            "diet": diet,
        }
    )
