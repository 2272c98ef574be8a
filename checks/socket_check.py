"""CPU / motherboard socket check."""
import logging

from models import (
    PartSelection, SocketCheck,
    STATUS_WAITING, STATUS_COMPATIBLE, STATUS_INCOMPATIBLE,
)
from spec_access import get_exact_string

logger = logging.getLogger(__name__)


def check_socket(selection: PartSelection) -> SocketCheck:
    cpu = selection.get("cpu")
    motherboard = selection.get("motherboard")
    if not cpu or not motherboard:
        return SocketCheck(STATUS_WAITING, "Waiting for CPU and motherboard selection")

    cpu_socket = get_exact_string(cpu.specifications, "socket")
    mb_socket = get_exact_string(motherboard.specifications, "socket")
    if not cpu_socket or not mb_socket:
        logger.debug(f"Socket info missing: cpu={cpu_socket!r} motherboard={mb_socket!r}")
        return SocketCheck(
            STATUS_INCOMPATIBLE,
            "Socket information incomplete",
            cpu_socket=cpu_socket,
            motherboard_socket=mb_socket,
        )

    # Exact match: "LGA1700", "LGA 1700" and "LGA1700 " are all different
    if cpu_socket == mb_socket:
        return SocketCheck(
            STATUS_COMPATIBLE,
            f"Socket {cpu_socket} is compatible",
            cpu_socket=cpu_socket,
            motherboard_socket=mb_socket,
        )
    return SocketCheck(
        STATUS_INCOMPATIBLE,
        f"Socket mismatch (CPU: {cpu_socket}, motherboard: {mb_socket})",
        cpu_socket=cpu_socket,
        motherboard_socket=mb_socket,
    )
