"""Physical fit of motherboard, GPU and cooler inside the case."""
import logging

from config import Config
from models import (
    PartSelection, PhysicalCheck, ClearanceCheck,
    STATUS_WAITING, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE,
)
from spec_access import get_array, get_number, get_string

logger = logging.getLogger(__name__)


def check_physical(selection: PartSelection, config: Config | None = None) -> PhysicalCheck:
    config = config or Config()
    case = selection.get("case")
    if not case:
        return PhysicalCheck(STATUS_WAITING, "Waiting for case selection")

    issues: list[str] = []
    warnings: list[str] = []
    clearances: list[ClearanceCheck] = []

    motherboard = selection.get("motherboard")
    if motherboard:
        form_factor = get_string(motherboard.specifications, "formFactor")
        supported = [str(f) for f in get_array(case.specifications, "supportedFormFactors")]
        # An empty supported list means the case does not constrain boards
        if form_factor and supported:
            ok = form_factor in supported
            clearances.append(ClearanceCheck(
                "motherboard form factor",
                "pass" if ok else "fail",
                f"{form_factor} vs supported [{', '.join(supported)}]",
            ))
            if not ok:
                issues.append(f"Motherboard form factor {form_factor} is not supported by the case")

    gpu = selection.get("gpu")
    gpu_length = 0
    if gpu:
        gpu_length = get_number(gpu.specifications, "length", 0)
        max_length = get_number(
            case.specifications, "maxGpuLength", 0, positive=True,
        )
        # No listed limit means nothing to compare against
        if gpu_length > 0 and max_length > 0:
            status = _measure(
                gpu_length, max_length, config.gpu_length_warning_ratio,
                issues, warnings,
                over=f"GPU length {gpu_length:g}mm exceeds the case limit {max_length:g}mm",
                near=f"GPU length is close to the case limit ({gpu_length:g}mm / {max_length:g}mm)",
            )
            clearances.append(ClearanceCheck(
                "GPU length", status,
                f"{gpu_length:g}mm vs limit {max_length:g}mm (margin {max_length - gpu_length:g}mm)",
            ))

    cooler = selection.get("cooler")
    cooler_height = 0
    if cooler:
        cooler_height = get_number(cooler.specifications, "height", 0)
        max_height = get_number(
            case.specifications, "maxCoolerHeight", 0, positive=True,
        )
        if cooler_height > 0 and max_height > 0:
            status = _measure(
                cooler_height, max_height, config.cooler_height_warning_ratio,
                issues, warnings,
                over=f"CPU cooler height {cooler_height:g}mm exceeds the case limit {max_height:g}mm",
                near=f"CPU cooler height is close to the case limit ({cooler_height:g}mm / {max_height:g}mm)",
            )
            clearances.append(ClearanceCheck(
                "cooler height", status,
                f"{cooler_height:g}mm vs limit {max_height:g}mm (margin {max_height - cooler_height:g}mm)",
            ))

    # Rough heuristic: a very long card next to a very tall tower cooler
    if gpu_length > config.clearance_gpu_length_mm and cooler_height > config.clearance_cooler_height_mm:
        note = (
            f"Large GPU ({gpu_length:g}mm) with a tall cooler ({cooler_height:g}mm) "
            f"may leave little clearance"
        )
        warnings.append(note)
        clearances.append(ClearanceCheck("GPU/cooler clearance", "warning", note))

    if issues:
        logger.debug(f"Physical fit issues in {case.name}: {issues}")
        message = f"{len(issues)} size problem(s) found"
    elif warnings:
        message = f"Physical fit OK with {len(warnings)} note(s)"
    else:
        message = "Physical fit OK"

    return PhysicalCheck(
        STATUS_INCOMPATIBLE if issues else STATUS_COMPATIBLE,
        message,
        issues=issues,
        warnings=warnings,
        clearances=clearances,
    )


def _measure(size, limit, warn_ratio, issues, warnings, over: str, near: str) -> str:
    if size > limit:
        issues.append(over)
        return "fail"
    if size > limit * warn_ratio:
        warnings.append(near)
        return "warning"
    return "pass"
