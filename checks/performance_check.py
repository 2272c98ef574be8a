"""CPU/GPU balance heuristic.

Uses the GPU/CPU price ratio as a crude proxy for relative performance. It is
only meant to nudge obviously lopsided builds, not to predict frame rates.
"""
import logging

from config import Config
from models import (
    PartSelection, PerformanceCheck,
    STATUS_WAITING, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE,
)
from spec_access import get_number, to_number

logger = logging.getLogger(__name__)


def price_ratio(cpu_price: float, gpu_price: float) -> float | None:
    """GPU price divided by CPU price; None when neither part is priced."""
    if cpu_price <= 0 and gpu_price <= 0:
        return None
    if cpu_price <= 0:
        return float("inf")
    return gpu_price / cpu_price


def check_performance(selection: PartSelection, config: Config | None = None) -> PerformanceCheck:
    config = config or Config()
    cpu = selection.get("cpu")
    gpu = selection.get("gpu")
    if not cpu or not gpu:
        return PerformanceCheck(STATUS_WAITING, "Waiting for CPU and GPU selection")

    bottlenecks = []
    recommendations = []

    ratio = price_ratio(to_number(cpu.price) or 0, to_number(gpu.price) or 0)
    if ratio is not None:
        if ratio < config.balance_low_ratio:
            bottlenecks.append("GPU underpowered relative to CPU")
        elif ratio > config.balance_high_ratio:
            bottlenecks.append("CPU underpowered relative to GPU")

    memory = selection.get("memory")
    if memory:
        capacity = get_number(memory.specifications, "capacity", 0)
        if capacity < config.recommended_memory_gb:
            recommendations.append(
                f"Consider at least {config.recommended_memory_gb}GB of memory "
                f"(selected: {capacity:g}GB)"
            )

    logger.debug(f"Performance check: ratio={ratio} bottlenecks={bottlenecks}")
    if bottlenecks:
        return PerformanceCheck(
            STATUS_INCOMPATIBLE,
            f"{len(bottlenecks)} balance issue(s) found",
            bottlenecks=bottlenecks,
            recommendations=recommendations,
            price_ratio=ratio,
        )
    return PerformanceCheck(
        STATUS_COMPATIBLE,
        "CPU/GPU balance OK",
        recommendations=recommendations,
        price_ratio=ratio,
    )
