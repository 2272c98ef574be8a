"""PSU power connector check."""
import logging
from collections import Counter

from models import (
    PartSelection, ConnectorCheck,
    STATUS_WAITING, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE,
)
from spec_access import get_array, get_object, get_string, to_number

logger = logging.getLogger(__name__)

# Required connector -> PSU connectors that can satisfy it (itself included)
CONNECTOR_ALIASES = {
    "8pin": ["8pin", "6+2pin", "8pin_pcie", "8pin_cpu", "4+4pin"],
    "8pin_cpu": ["8pin_cpu", "4+4pin"],
    "4pin": ["4pin", "4+4pin"],
    "6pin": ["6pin", "6pin_pcie", "6+2pin"],
    "12pin_pcie": ["12pin_pcie", "12VHPWR"],
    "16pin_pcie": ["16pin_pcie", "12V-2x6", "12VHPWR"],
    "12VHPWR": ["12VHPWR", "12V-2x6"],
}

ATX_MAIN_CONNECTOR = "24pin"
DEFAULT_CPU_CONNECTOR = "8pin"


def is_connector_compatible(required: str, available: str) -> bool:
    return available in CONNECTOR_ALIASES.get(required, [required])


def count_connectors(connectors: dict) -> Counter:
    """Turn a {type: count} mapping into a Counter, dropping bad or zero counts."""
    counts = Counter()
    for kind, count in connectors.items():
        n = to_number(count)
        if n is None or n < 1:
            continue
        counts[str(kind)] += int(n)
    return counts


def match_connectors(required: list[str], available) -> list[str]:
    """Greedily match each required connector; returns the unmatched ones.

    ``available`` is a Counter or a list of connector names. Aliases are tried
    in table order, so an exact connector is used before an adapter-style one.
    Each available connector is consumed at most once.
    """
    pool = Counter(available)
    missing = []
    for need in required:
        for candidate in CONNECTOR_ALIASES.get(need, [need]):
            if pool[candidate] > 0:
                pool[candidate] -= 1
                break
        else:
            missing.append(need)
    return missing


def check_connectors(selection: PartSelection) -> ConnectorCheck:
    psu = selection.get("psu")
    if not psu:
        return ConnectorCheck(STATUS_WAITING, "Waiting for PSU selection")

    gpu = selection.get("gpu")
    motherboard = selection.get("motherboard")

    required = []
    if motherboard:
        required.append(ATX_MAIN_CONNECTOR)
        required.append(
            get_string(motherboard.specifications, "cpuPowerConnector", DEFAULT_CPU_CONNECTOR)
        )
    if gpu:
        required.extend(str(c) for c in get_array(gpu.specifications, "powerConnectors"))

    available = count_connectors(get_object(psu.specifications, "connectors"))
    missing = match_connectors(required, available)

    if missing:
        logger.debug(f"Connectors missing on {psu.name}: {missing} (have {available})")
        return ConnectorCheck(
            STATUS_INCOMPATIBLE,
            f"Missing power connectors: {', '.join(missing)}",
            required=required,
            available=dict(available),
            missing=missing,
        )
    return ConnectorCheck(
        STATUS_COMPATIBLE,
        "Power connectors OK",
        required=required,
        available=dict(available),
    )
