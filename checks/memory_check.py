"""Memory type and capacity check against the motherboard."""
import logging

from config import Config
from models import (
    PartSelection, MemoryCheck,
    STATUS_WAITING, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE,
)
from spec_access import get_array, get_exact_string, get_number

logger = logging.getLogger(__name__)


def check_memory(selection: PartSelection, config: Config | None = None) -> MemoryCheck:
    """Memory type must be in the board's supported list (empty = any) and the
    kit capacity must not exceed the board maximum."""
    config = config or Config()
    memory = selection.get("memory")
    motherboard = selection.get("motherboard")
    if not memory or not motherboard:
        return MemoryCheck(STATUS_WAITING, "Waiting for memory and motherboard selection")

    memory_type = get_exact_string(memory.specifications, "type")
    supported = [t for t in get_array(motherboard.specifications, "memoryType") if isinstance(t, str)]
    max_capacity = get_number(
        motherboard.specifications, "maxMemory", config.default_max_memory_gb, positive=True,
    )
    capacity = get_number(memory.specifications, "capacity", 0)

    warnings = []
    modules = get_number(memory.specifications, "modules", 0)
    if modules == 1:
        warnings.append("Single memory module; a two-module kit enables dual-channel bandwidth")

    if not memory_type:
        return MemoryCheck(
            STATUS_INCOMPATIBLE,
            "Memory type information incomplete",
            supported_types=supported,
            max_capacity=max_capacity,
            memory_capacity=capacity,
            type_compatible=False,
            warnings=warnings,
        )

    type_ok = not supported or memory_type in supported
    capacity_ok = capacity <= max_capacity

    if not type_ok:
        message = f"Memory type not supported (memory: {memory_type}, supported: {', '.join(supported)})"
    elif not capacity_ok:
        message = f"Memory capacity exceeds the motherboard limit ({capacity:g}GB > {max_capacity:g}GB)"
    else:
        message = f"{memory_type} memory is compatible"
    if not type_ok and not capacity_ok:
        message += f"; capacity {capacity:g}GB also exceeds {max_capacity:g}GB"

    logger.debug(f"Memory check: type_ok={type_ok} capacity_ok={capacity_ok} ({message})")
    return MemoryCheck(
        STATUS_COMPATIBLE if type_ok and capacity_ok else STATUS_INCOMPATIBLE,
        message,
        memory_type=memory_type,
        supported_types=supported,
        max_capacity=max_capacity,
        memory_capacity=capacity,
        type_compatible=type_ok,
        capacity_compatible=capacity_ok,
        warnings=warnings,
    )
