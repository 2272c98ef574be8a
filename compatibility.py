"""Compatibility engine: runs every check and scores the selection."""
import logging

from checks.connector_check import check_connectors
from checks.memory_check import check_memory
from checks.performance_check import check_performance
from checks.physical_check import check_physical
from checks.socket_check import check_socket
from config import Config
from display_names import category_label
from models import (
    CompatibilityDetails, CompatibilityIssue, CompatibilityResult,
    CompatibilityWarning, PartSelection, as_selection,
)

logger = logging.getLogger(__name__)


def find_missing_parts(selection: PartSelection, config: Config) -> list[str]:
    return [c for c in config.required_categories if c not in selection]


def evaluate_compatibility(selection, config: Config | None = None) -> CompatibilityResult:
    """Evaluate a part selection and return issues, warnings and a 0-100 score.

    Never raises for any selection content: missing parts put checks in the
    waiting state, incomplete specs become incompatibilities.
    """
    config = config or Config()
    selection = as_selection(selection)

    issues: list[CompatibilityIssue] = []
    warnings: list[CompatibilityWarning] = []

    for category in find_missing_parts(selection, config):
        label = category_label(category)
        issues.append(CompatibilityIssue(
            id=f"missing_{category}",
            type="missing_part",
            severity="critical",
            message=f"Select a {label}",
            affected_parts=[category],
            solution=f"Add a {label} to the build",
            category="Required parts",
        ))

    details = CompatibilityDetails(
        cpu_socket=check_socket(selection),
        memory_type=check_memory(selection, config),
        power_connectors=check_connectors(selection),
        physical_fit=check_physical(selection, config),
        performance_match=check_performance(selection, config),
    )

    if not details.cpu_socket.compatible:
        issues.append(CompatibilityIssue(
            id="cpu_socket_mismatch",
            type="socket_mismatch",
            severity="critical",
            message=details.cpu_socket.message,
            affected_parts=["cpu", "motherboard"],
            solution="Choose a motherboard with the same socket as the CPU",
            category="Socket",
        ))

    if not details.memory_type.compatible:
        issues.append(CompatibilityIssue(
            id="memory_type_mismatch",
            type="memory_incompatible",
            severity="critical",
            message=details.memory_type.message,
            affected_parts=["memory", "motherboard"],
            solution="Choose memory of a type and size the motherboard supports",
            category="Memory",
        ))

    if not details.power_connectors.compatible:
        issues.append(CompatibilityIssue(
            id="power_connector_missing",
            type="connector_missing",
            severity="critical",
            message=details.power_connectors.message,
            affected_parts=["psu", "gpu", "motherboard"],
            solution="Choose a PSU that provides the required connectors",
            category="Power connectors",
        ))

    for i, problem in enumerate(details.physical_fit.issues):
        issues.append(CompatibilityIssue(
            id=f"physical_fit_{i}",
            type="size_conflict",
            severity="critical",
            message=problem,
            affected_parts=["case", "motherboard", "gpu", "cooler"],
            solution="Consider a larger case or smaller parts",
            category="Physical size",
        ))

    # Non-blocking: reported even when the physical check passes
    for i, note in enumerate(details.physical_fit.warnings):
        warnings.append(CompatibilityWarning(
            id=f"physical_warning_{i}",
            message=note,
            recommendation="Double-check the measurements before buying",
            priority="medium",
        ))

    for i, note in enumerate(details.memory_type.warnings):
        warnings.append(CompatibilityWarning(
            id=f"memory_warning_{i}",
            message=note,
            recommendation="Use two or four identical modules",
            priority="low",
        ))

    for i, bottleneck in enumerate(details.performance_match.bottlenecks):
        warnings.append(CompatibilityWarning(
            id=f"performance_bottleneck_{i}",
            message=bottleneck,
            recommendation="Consider a more balanced CPU/GPU pairing",
            priority="low",
        ))

    for i, rec in enumerate(details.performance_match.recommendations):
        warnings.append(CompatibilityWarning(
            id=f"performance_recommendation_{i}",
            message=rec,
            recommendation="Upgrade when the budget allows",
            priority="low",
        ))

    score = calculate_score(details, issues, warnings, config)
    waiting = [name for name, check in details.all() if check.waiting]
    critical = [i for i in issues if i.severity == "critical"]
    is_compatible = not critical and not waiting

    for name, check in details.all():
        logger.debug(f"{name}: {check.status} ({check.message})")
    logger.info(
        f"Compatibility: score={score} compatible={is_compatible} "
        f"issues={len(issues)} warnings={len(warnings)} waiting={waiting}"
    )

    return CompatibilityResult(
        is_compatible=is_compatible,
        issues=issues,
        warnings=warnings,
        score=score,
        details=details,
    )


def calculate_score(
    details: CompatibilityDetails,
    issues: list[CompatibilityIssue],
    warnings: list[CompatibilityWarning],
    config: Config | None = None,
) -> int:
    """Score the selection from 100 down, clamped to [0, 100].

    Each check that is waiting or failing costs its weight once. Every issue
    other than a missing part costs ``issue_penalty`` (a missing part is
    already charged through the waiting checks), every warning costs
    ``warning_penalty``.
    """
    config = config or Config()
    score = 100
    for name, check in details.all():
        if check.waiting or not check.compatible:
            score -= config.check_weights.get(name, 0)
    score -= config.issue_penalty * sum(1 for i in issues if i.type != "missing_part")
    score -= config.warning_penalty * len(warnings)
    return max(0, min(100, score))
