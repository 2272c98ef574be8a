"""Load a part selection from a JSON build file."""
import json
import logging
import os
import re

from models import PART_CATEGORIES, Part, PartSelection, PowerProfile
from spec_access import to_number

logger = logging.getLogger(__name__)


class BuildFileError(ValueError):
    """The build file is missing or not in the expected shape."""


def parse_part(raw: dict) -> Part:
    if not isinstance(raw, dict):
        raise BuildFileError(f"Part entry must be an object, got {type(raw).__name__}")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise BuildFileError(f"Part entry has no name: {raw}")

    category = str(raw.get("category") or "other").lower()
    if category not in PART_CATEGORIES:
        logger.warning(f"Unknown category '{category}' for {name}, treating as 'other'")
        category = "other"

    specs = raw.get("specifications") or {}
    if not isinstance(specs, dict):
        logger.warning(f"Ignoring non-object specifications for {name}")
        specs = {}

    power = None
    raw_power = raw.get("power")
    if isinstance(raw_power, dict):
        power = PowerProfile(
            idle=to_number(raw_power.get("idle")) or 0,
            base=to_number(raw_power.get("base")) or 0,
            max=to_number(raw_power.get("max")) or 0,
            efficiency=to_number(raw_power.get("efficiency")) or 85,
        )

    return Part(
        id=str(raw.get("id") or re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")),
        name=name,
        category=category,
        manufacturer=str(raw.get("manufacturer") or ""),
        price=int(to_number(raw.get("price")) or 0),
        specifications=specs,
        power=power,
    )


def load_build(path: str) -> PartSelection:
    """Read ``{"parts": [...]}`` from ``path``. Later parts replace earlier
    parts of the same category."""
    if not os.path.isfile(path):
        raise BuildFileError(f"Build file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise BuildFileError(f"Invalid JSON in {path}: {e}") from e

    raw_parts = data.get("parts") if isinstance(data, dict) else data
    if not isinstance(raw_parts, list):
        raise BuildFileError(f"{path}: expected a 'parts' list")

    selection = PartSelection()
    for raw in raw_parts:
        part = parse_part(raw)
        if part.category in selection:
            logger.warning(f"Replacing {part.category} '{selection.get(part.category).name}' with '{part.name}'")
        selection.select(part)
    logger.info(f"Loaded {len(selection)} parts from {path}")
    return selection
