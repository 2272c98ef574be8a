"""Power budget: totals, PSU sizing warnings and running cost."""
import logging
import math
import re

from config import Config
from models import (
    MonthlyCost, Part, PowerConsumption, PowerProfile, PowerResult,
    PowerWarning, PSUSpecification, as_selection,
)
from power_specs import PowerSpecLookup, psu_reference_list, system_overhead
from spec_access import get_string, get_value, to_number

logger = logging.getLogger(__name__)

_WATTAGE_RE = re.compile(r"(\d+)\s*W\b", re.IGNORECASE)
_EFFICIENCY_MARKS = ("80+", "80 plus", "bronze", "silver", "gold", "platinum", "titanium")

DAYS_PER_MONTH = 30
PEAK_SHARE_OF_USAGE = 0.1  # fraction of active hours spent at peak draw
SYSTEM_CATEGORY = "system"  # consumption row for fans, USB, LED and network


def psu_capacity(psu: Part, config: Config | None = None) -> int:
    """PSU wattage from specs ('capacity' or 'wattage'), then the name, then a default."""
    config = config or Config()
    for key in ("capacity", "wattage"):
        value = to_number(get_value(psu.specifications, key))
        if value is not None and value > 0:
            return int(value)
    match = _WATTAGE_RE.search(psu.name or "")
    if match:
        return int(match.group(1))
    logger.debug(f"No capacity found for PSU '{psu.name}', assuming {config.default_psu_capacity}W")
    return config.default_psu_capacity


def has_efficiency_certification(psu: Part) -> bool:
    name = (psu.name or "").lower()
    rating = get_string(psu.specifications, "efficiency").lower()
    return any(mark in name or mark in rating for mark in _EFFICIENCY_MARKS)


def explicit_profile(part: Part) -> PowerProfile | None:
    """The part's own power fields, or None if absent or not all numeric."""
    if not isinstance(part.power, PowerProfile):
        return None
    p = part.power
    values = [to_number(v) for v in (p.idle, p.base, p.max, p.efficiency)]
    if None in values:
        logger.warning(f"Ignoring invalid power data for '{part.name}': {p}")
        return None
    return PowerProfile(*values)


def part_power(part: Part, lookup: PowerSpecLookup, category: str | None = None) -> PowerConsumption:
    profile = explicit_profile(part) or lookup.get_profile(part)
    return PowerConsumption(
        component=part.name,
        category=category or part.category,
        part_id=part.id,
        part_name=part.name,
        idle_power=profile.idle,
        base_power=profile.base,
        max_power=profile.max,
        efficiency=profile.efficiency,
    )


def recommended_psu_wattage(max_power: float, config: Config | None = None) -> int:
    """Round max draw plus the safety margin up to the next PSU step."""
    config = config or Config()
    step = config.psu_step_watts
    return int(math.ceil(max_power * (1 + config.safety_margin) / step) * step)


def overall_efficiency(consumptions: list[PowerConsumption]) -> int:
    """Efficiency averaged over components, weighted by their max draw."""
    total = sum(c.max_power for c in consumptions)
    if total <= 0:
        return 85
    weighted = sum((c.efficiency or 85) * c.max_power / total for c in consumptions)
    return int(round(weighted))


def evaluate_power(selection, config: Config | None = None,
                   lookup: PowerSpecLookup | None = None) -> PowerResult:
    config = config or Config()
    lookup = lookup or PowerSpecLookup()
    selection = as_selection(selection)

    consumptions = [
        part_power(part, lookup, category)
        for category, part in selection.items()
        if category != "psu"
    ]

    overhead = system_overhead()
    consumptions.append(PowerConsumption(
        component="System",
        category=SYSTEM_CATEGORY,
        part_id="system-overhead",
        part_name="System overhead (fans, USB, LED, network)",
        idle_power=overhead.idle,
        base_power=overhead.base,
        max_power=overhead.max,
        efficiency=overhead.efficiency,
    ))

    total_idle = sum(c.idle_power for c in consumptions)
    total_base = sum(c.base_power for c in consumptions)
    total_max = sum(c.max_power for c in consumptions)
    recommended = recommended_psu_wattage(total_max, config)

    psu = selection.get("psu")
    capacity = psu_capacity(psu, config) if psu else 0
    load = (total_max / capacity) * 100 if capacity else 0.0

    gpu_consumption = next((c for c in consumptions if c.category == "gpu"), None)
    warnings = power_warnings(psu, capacity, total_max, recommended, load, gpu_consumption, config)
    optimal = bool(psu) and is_power_optimal(psu, capacity, load, recommended, config)

    logger.info(
        f"Power: max={total_max:.0f}W recommended={recommended}W "
        f"psu={capacity or 'none'} load={load:.0f}% warnings={len(warnings)}"
    )

    return PowerResult(
        total_idle_power=total_idle,
        total_base_power=total_base,
        total_max_power=total_max,
        recommended_psu=recommended,
        safety_margin=config.safety_margin * 100,
        power_efficiency=overall_efficiency(consumptions),
        psu_capacity=capacity,
        psu_load_percentage=load,
        consumptions=consumptions,
        warnings=warnings,
        is_optimal=optimal,
    )


def power_warnings(
    psu: Part | None,
    capacity: int,
    total_max: float,
    recommended: int,
    load: float,
    gpu: PowerConsumption | None,
    config: Config,
) -> list[PowerWarning]:
    warnings = []

    if not psu:
        warnings.append(PowerWarning(
            id="no-psu",
            type="insufficient_capacity",
            severity="critical",
            message="No PSU selected",
            value=0,
            threshold=total_max,
            suggestion=f"Choose a PSU of at least {recommended}W",
        ))
    else:
        if capacity < total_max:
            warnings.append(PowerWarning(
                id="insufficient-capacity",
                type="insufficient_capacity",
                severity="critical",
                message=f"PSU capacity is too low (have {capacity}W, need {total_max:.0f}W)",
                value=capacity,
                threshold=total_max,
                suggestion=f"Replace it with a PSU of at least {recommended}W",
            ))
        elif capacity < recommended:
            warnings.append(PowerWarning(
                id="insufficient-margin",
                type="insufficient_headroom",
                severity="high",
                message=f"PSU has no safety margin ({capacity}W for a {total_max:.0f}W peak)",
                value=capacity,
                threshold=recommended,
                suggestion=f"A PSU of {recommended}W or more is recommended",
            ))
        elif capacity > recommended * config.oversized_psu_factor:
            warnings.append(PowerWarning(
                id="oversized-psu",
                type="low_efficiency",
                severity="low",
                message="PSU is much larger than needed; efficiency suffers at low load",
                value=capacity,
                threshold=recommended * config.oversized_psu_factor,
                suggestion=f"A PSU around {recommended}W is enough",
            ))

        if load > config.high_load_percentage:
            warnings.append(PowerWarning(
                id="high-load",
                type="high_load_percentage",
                severity="high",
                message=f"PSU load is too high ({load:.0f}%)",
                value=load,
                threshold=config.high_load_percentage,
                suggestion="Consider a higher-capacity PSU",
            ))

        if not has_efficiency_certification(psu):
            warnings.append(PowerWarning(
                id="no-efficiency-cert",
                type="low_efficiency",
                severity="medium",
                message="Selected PSU has no 80 PLUS efficiency certification",
                value=0,
                threshold=80,
                suggestion="An 80+ Bronze or better PSU is recommended",
            ))

    if gpu and gpu.max_power > config.high_gpu_power_watts:
        warnings.append(PowerWarning(
            id="high-gpu-power",
            type="high_load_percentage",
            severity="medium",
            message=f"High-power GPU selected ({gpu.max_power:.0f}W); make sure power and cooling are sufficient",
            value=gpu.max_power,
            threshold=config.high_gpu_power_watts,
            suggestion="An 80+ Gold or better PSU is recommended",
        ))

    return warnings


def is_power_optimal(psu: Part, capacity: int, load: float, recommended: int,
                     config: Config) -> bool:
    capacity_ok = recommended <= capacity <= recommended * config.optimal_capacity_factor
    load_ok = config.optimal_load_min <= load <= config.optimal_load_max
    return capacity_ok and load_ok and has_efficiency_certification(psu)


def recommend_psus(required_wattage: float) -> list[PSUSpecification]:
    """Reference PSUs with at least ``required_wattage``, smallest first."""
    matches = [p for p in psu_reference_list() if p.capacity >= required_wattage]
    return sorted(matches, key=lambda p: p.capacity)


def estimate_monthly_cost(power_result: PowerResult, usage_hours_per_day: float,
                          rate_per_kwh: float) -> MonthlyCost:
    """Monthly electricity cost split into idle, normal and peak use.

    The machine idles for the hours it is not in use and spends 10% of the
    active hours at peak draw.
    """
    hours = min(max(usage_hours_per_day or 0, 0), 24)
    idle_hours = 24 - hours
    peak_hours = hours * PEAK_SHARE_OF_USAGE

    def cost(watts: float, hours_per_day: float) -> float:
        return watts / 1000 * hours_per_day * DAYS_PER_MONTH * rate_per_kwh

    return MonthlyCost(
        idle=cost(power_result.total_idle_power, idle_hours),
        normal=cost(power_result.total_base_power, hours),
        peak=cost(power_result.total_max_power, peak_hours),
    )
