"""Power draw lookup using a local table of typical component wattages."""
import logging

from models import Part, PowerProfile, PSUSpecification
from spec_access import get_number, get_string

logger = logging.getLogger(__name__)

# Typical draw per model (approximate, for PSU sizing only)
# (part id, model, idle W, base W, max W, efficiency %)
_POWER_DATABASE = {
    "cpu": [
        # Intel 14th / 13th Gen (LGA 1700)
        ("intel-i9-14900k", "Core i9-14900K", 15, 125, 253, 80),
        ("intel-i7-14700k", "Core i7-14700K", 14, 125, 253, 81),
        ("intel-i5-14600k", "Core i5-14600K", 12, 125, 181, 84),
        ("intel-i9-13900k", "Core i9-13900K", 15, 125, 253, 80),
        ("intel-i7-13700k", "Core i7-13700K", 15, 125, 253, 82),
        ("intel-i5-13600k", "Core i5-13600K", 12, 125, 181, 84),
        ("intel-i5-13400", "Core i5-13400", 8, 65, 148, 86),
        # Intel Core Ultra (LGA 1851)
        ("intel-ultra-9-285k", "Core Ultra 9 285K", 12, 125, 250, 83),
        ("intel-ultra-7-265k", "Core Ultra 7 265K", 11, 125, 250, 84),
        # AMD Ryzen 9000 / 7000 (AM5)
        ("amd-ryzen-9-9950x", "Ryzen 9 9950X", 12, 170, 230, 86),
        ("amd-ryzen-7-9800x3d", "Ryzen 7 9800X3D", 8, 120, 162, 88),
        ("amd-ryzen-7-9700x", "Ryzen 7 9700X", 7, 65, 88, 89),
        ("amd-ryzen-9-7950x", "Ryzen 9 7950X", 12, 170, 230, 85),
        ("amd-ryzen-7-7800x3d", "Ryzen 7 7800X3D", 8, 120, 162, 88),
        ("amd-ryzen-7-7700x", "Ryzen 7 7700X", 8, 105, 142, 88),
        ("amd-ryzen-5-7600x", "Ryzen 5 7600X", 6, 105, 142, 87),
        ("amd-ryzen-5-7600", "Ryzen 5 7600", 6, 65, 88, 88),
    ],
    "gpu": [
        # NVIDIA
        ("rtx-5090", "RTX 5090", 30, 575, 575, 77),
        ("rtx-5080", "RTX 5080", 22, 360, 360, 79),
        ("rtx-4090", "RTX 4090", 25, 450, 450, 78),
        ("rtx-4080", "RTX 4080", 20, 320, 320, 80),
        ("rtx-4070-ti", "RTX 4070 Ti", 18, 285, 285, 81),
        ("rtx-4070", "RTX 4070", 15, 200, 200, 82),
        ("rtx-4060-ti", "RTX 4060 Ti", 12, 160, 165, 84),
        ("rtx-4060", "RTX 4060", 10, 115, 115, 85),
        # AMD
        ("rx-7900xtx", "RX 7900 XTX", 20, 355, 355, 79),
        ("rx-7900xt", "RX 7900 XT", 18, 315, 315, 80),
        ("rx-7800xt", "RX 7800 XT", 15, 263, 263, 81),
        ("rx-7600", "RX 7600", 10, 165, 165, 83),
    ],
}

# Fallbacks keyed by a spec value (form factor, memory type, drive type, cooler type)
_SPEC_HINTS = {
    "motherboard": {
        "eatx": PowerProfile(30, 40, 55, 87),
        "atx": PowerProfile(25, 30, 40, 88),
        "microatx": PowerProfile(20, 25, 35, 90),
        "matx": PowerProfile(20, 25, 35, 90),
        "miniitx": PowerProfile(15, 20, 30, 92),
    },
    "memory": {
        "ddr4": PowerProfile(2, 3, 5, 95),
        "ddr5": PowerProfile(3, 4, 6, 93),
    },
    "storage": {
        "nvme": PowerProfile(2, 6, 9, 88),
        "ssd": PowerProfile(1, 3, 5, 95),
        "hdd": PowerProfile(3, 8, 12, 85),
    },
    "cooler": {
        "air": PowerProfile(1, 2, 4, 90),  # fan only
        "aio120": PowerProfile(5, 10, 15, 90),
        "aio240": PowerProfile(8, 15, 25, 88),
        "aio280": PowerProfile(10, 18, 30, 86),
        "aio360": PowerProfile(12, 20, 35, 85),
    },
}

_CATEGORY_DEFAULTS = {
    "cpu": PowerProfile(10, 65, 125, 85),
    "gpu": PowerProfile(15, 150, 250, 80),
    "motherboard": PowerProfile(20, 25, 35, 90),
    "memory": PowerProfile(2, 3, 5, 95),
    "storage": PowerProfile(2, 5, 8, 90),
    "cooler": PowerProfile(5, 15, 25, 85),
}

GENERIC_PROFILE = PowerProfile(5, 10, 20, 85)

# Case fans, USB devices, LEDs and onboard networking
SYSTEM_FAN_COUNT = 3
SYSTEM_FAN_WATTS = 2
SYSTEM_USB_WATTS = 5
SYSTEM_LED_WATTS = 3
SYSTEM_NETWORK_WATTS = 2
SYSTEM_EFFICIENCY = 80


def system_overhead() -> PowerProfile:
    base = (SYSTEM_FAN_COUNT * SYSTEM_FAN_WATTS + SYSTEM_USB_WATTS
            + SYSTEM_LED_WATTS + SYSTEM_NETWORK_WATTS)
    return PowerProfile(idle=base * 0.4, base=base, max=base * 1.5, efficiency=SYSTEM_EFFICIENCY)


# Reference PSUs offered when the selected one is too small
_PSU_REFERENCE = [
    ("be-quiet-pure-power-12-550", "be quiet! Pure Power 12 550W", 550, "80+ Gold", True, 10500, 88,
     {"24pin": 1, "4+4pin": 1, "6+2pin": 2, "sata": 6}),
    ("corsair-rm650e", "Corsair RM650e", 650, "80+ Gold", True, 12000, 88,
     {"24pin": 1, "4+4pin": 2, "6+2pin": 3, "sata": 7}),
    ("corsair-rm750x", "Corsair RM750x", 750, "80+ Gold", True, 15000, 87,
     {"24pin": 1, "4+4pin": 2, "6+2pin": 4, "sata": 8}),
    ("seasonic-focus-gx-850", "Seasonic Focus GX-850", 850, "80+ Gold", True, 18000, 90,
     {"24pin": 1, "4+4pin": 2, "6+2pin": 4, "12VHPWR": 1, "sata": 8}),
    ("evga-supernova-1000-g5", "EVGA SuperNOVA 1000 G5", 1000, "80+ Gold", True, 22000, 88,
     {"24pin": 1, "4+4pin": 2, "6+2pin": 5, "sata": 10}),
    ("corsair-hx1200", "Corsair HX1200", 1200, "80+ Platinum", True, 32000, 92,
     {"24pin": 1, "4+4pin": 2, "6+2pin": 6, "12VHPWR": 1, "sata": 12}),
]


def psu_reference_list() -> list[PSUSpecification]:
    return [
        PSUSpecification(
            id=pid, name=name, capacity=capacity, efficiency=rating,
            modular=modular, price=price, efficiency_percentage=pct,
            connectors=dict(connectors),
        )
        for pid, name, capacity, rating, modular, price, pct, connectors in _PSU_REFERENCE
    ]


def _normalize(text: str) -> str:
    """Lowercase and drop separators so 'RX 7900XTX' matches 'RX 7900 XTX'."""
    return "".join(ch for ch in str(text).lower() if ch.isalnum())


class PowerSpecLookup:
    def __init__(self):
        self._by_id: dict[str, PowerProfile] = {}
        # Longest model names first so "RTX 4070 Ti" wins over "RTX 4070"
        self._by_model: dict[str, list[tuple[str, PowerProfile]]] = {}
        for category, entries in _POWER_DATABASE.items():
            rows = []
            for part_id, model, idle, base, peak, eff in entries:
                profile = PowerProfile(idle, base, peak, eff)
                self._by_id[part_id] = profile
                rows.append((_normalize(model), profile))
            rows.sort(key=lambda r: -len(r[0]))
            self._by_model[category] = rows

    def get_profile(self, part: Part) -> PowerProfile:
        """Resolve a part's power profile.

        Order: exact part id, model name contained in the part name, category
        spec hint, category default, generic profile.
        """
        profile = self._by_id.get(part.id) if isinstance(part.id, str) else None
        if profile is not None:
            return profile

        name = _normalize(part.name or "")
        for key, profile in self._by_model.get(part.category, []):
            if key and key in name:
                return profile

        hint = self._spec_hint(part)
        if hint is not None:
            return hint

        default = _CATEGORY_DEFAULTS.get(part.category)
        if default is not None:
            logger.debug(f"No power data for {part.category} '{part.name}', using category default")
            return default
        logger.debug(f"No power data for {part.category} '{part.name}', using generic profile")
        return GENERIC_PROFILE

    def _spec_hint(self, part: Part) -> PowerProfile | None:
        hints = _SPEC_HINTS.get(part.category)
        if not hints:
            return None
        specs = part.specifications
        if part.category == "motherboard":
            key = _normalize(get_string(specs, "formFactor"))
        elif part.category == "cooler":
            key = self._cooler_key(part)
        else:
            key = _normalize(get_string(specs, "type"))
        return hints.get(key) if key else None

    @staticmethod
    def _cooler_key(part: Part) -> str:
        kind = get_string(part.specifications, "type").lower()
        name = (part.name or "").lower()
        if any(w in kind or w in name for w in ("aio", "liquid", "water")):
            size = int(get_number(part.specifications, "radiatorSize", 240, positive=True))
            return f"aio{size}"
        if "air" in kind:
            return "air"
        return ""
