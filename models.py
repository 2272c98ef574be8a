"""Data models for the PC build checker."""
from dataclasses import dataclass, field
from datetime import datetime

PART_CATEGORIES = (
    "cpu", "gpu", "motherboard", "memory", "storage",
    "psu", "case", "cooler", "monitor", "other",
)

# Check states
STATUS_WAITING = "waiting"  # a required part is not selected yet
STATUS_COMPATIBLE = "compatible"
STATUS_INCOMPATIBLE = "incompatible"


@dataclass
class PowerProfile:
    idle: float = 0.0
    base: float = 0.0
    max: float = 0.0
    efficiency: float = 85.0  # percent


@dataclass
class Part:
    id: str
    name: str
    category: str  # one of PART_CATEGORIES
    manufacturer: str = ""
    price: int = 0
    specifications: dict = field(default_factory=dict)
    power: PowerProfile | None = None  # explicit draw, overrides the lookup table


@dataclass
class PartSelection:
    """The parts currently chosen for a build, at most one per category."""
    parts: dict[str, Part] = field(default_factory=dict)

    @classmethod
    def from_parts(cls, parts: list[Part]) -> "PartSelection":
        selection = cls()
        for part in parts:
            selection.select(part)
        return selection

    def get(self, category: str) -> Part | None:
        return self.parts.get(category)

    def select(self, part: Part):
        self.parts[part.category] = part

    def remove(self, category: str):
        self.parts.pop(category, None)

    def categories(self) -> list[str]:
        return [c for c in PART_CATEGORIES if c in self.parts] + [
            c for c in self.parts if c not in PART_CATEGORIES
        ]

    def items(self) -> list[tuple[str, Part]]:
        return [(c, self.parts[c]) for c in self.categories()]

    def total_price(self) -> int:
        return sum(p.price for p in self.parts.values())

    def __contains__(self, category: str) -> bool:
        return category in self.parts

    def __len__(self) -> int:
        return len(self.parts)


def as_selection(value) -> PartSelection:
    """Accept a PartSelection or a plain mapping of category -> Part/None."""
    if isinstance(value, PartSelection):
        return value
    selection = PartSelection()
    if not value:
        return selection
    for category, part in dict(value).items():
        if isinstance(part, Part):
            selection.parts[category] = part
    return selection


# --- Checker results ---

@dataclass
class CheckResult:
    status: str
    message: str

    @property
    def waiting(self) -> bool:
        return self.status == STATUS_WAITING

    @property
    def compatible(self) -> bool:
        # waiting counts as compatible; it blocks is_compatible via the engine
        return self.status != STATUS_INCOMPATIBLE


@dataclass
class SocketCheck(CheckResult):
    cpu_socket: str = ""
    motherboard_socket: str = ""


@dataclass
class MemoryCheck(CheckResult):
    memory_type: str = ""
    supported_types: list[str] = field(default_factory=list)
    max_capacity: float = 0
    memory_capacity: float = 0
    type_compatible: bool = True
    capacity_compatible: bool = True
    warnings: list[str] = field(default_factory=list)


@dataclass
class ConnectorCheck(CheckResult):
    required: list[str] = field(default_factory=list)
    available: dict[str, int] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)


@dataclass
class ClearanceCheck:
    check: str
    status: str  # "pass" | "warning" | "fail"
    details: str


@dataclass
class PhysicalCheck(CheckResult):
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    clearances: list[ClearanceCheck] = field(default_factory=list)


@dataclass
class PerformanceCheck(CheckResult):
    bottlenecks: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    price_ratio: float | None = None  # gpu price / cpu price

    @property
    def balanced(self) -> bool:
        return self.compatible


# --- Compatibility ---

@dataclass
class CompatibilityIssue:
    id: str
    type: str  # missing_part | socket_mismatch | memory_incompatible | connector_missing | size_conflict
    severity: str  # critical | warning
    message: str
    affected_parts: list[str] = field(default_factory=list)
    solution: str = ""
    category: str = ""


@dataclass
class CompatibilityWarning:
    id: str
    message: str
    recommendation: str = ""
    priority: str = "medium"  # low | medium | high


@dataclass
class CompatibilityDetails:
    cpu_socket: SocketCheck
    memory_type: MemoryCheck
    power_connectors: ConnectorCheck
    physical_fit: PhysicalCheck
    performance_match: PerformanceCheck

    def all(self) -> list[tuple[str, CheckResult]]:
        return [
            ("socket", self.cpu_socket),
            ("memory", self.memory_type),
            ("connectors", self.power_connectors),
            ("physical", self.physical_fit),
            ("performance", self.performance_match),
        ]


@dataclass
class CompatibilityResult:
    is_compatible: bool
    issues: list[CompatibilityIssue]
    warnings: list[CompatibilityWarning]
    score: int
    details: CompatibilityDetails
    checked_at: str = field(default_factory=lambda: datetime.now().isoformat(), compare=False)

    def critical_issues(self) -> list[CompatibilityIssue]:
        return [i for i in self.issues if i.severity == "critical"]


# --- Power ---

@dataclass
class PowerConsumption:
    component: str
    category: str
    part_id: str
    part_name: str
    idle_power: float = 0.0
    base_power: float = 0.0
    max_power: float = 0.0
    efficiency: float = 85.0


@dataclass
class PowerWarning:
    id: str
    type: str  # insufficient_capacity | insufficient_headroom | high_load_percentage | low_efficiency
    severity: str  # critical | high | medium | low
    message: str
    value: float = 0.0
    threshold: float = 0.0
    suggestion: str = ""


@dataclass
class PowerResult:
    total_idle_power: float
    total_base_power: float
    total_max_power: float
    recommended_psu: int
    safety_margin: float  # percent
    power_efficiency: int
    psu_capacity: int = 0  # 0 = no PSU selected
    psu_load_percentage: float = 0.0
    consumptions: list[PowerConsumption] = field(default_factory=list)
    warnings: list[PowerWarning] = field(default_factory=list)
    is_optimal: bool = False

    @property
    def headroom(self) -> float:
        if not self.psu_capacity:
            return 0.0
        return self.psu_capacity - self.total_max_power


@dataclass
class PSUSpecification:
    id: str
    name: str
    capacity: int
    efficiency: str  # e.g. "80+ Gold"
    modular: bool = False
    price: int = 0
    efficiency_percentage: int = 0
    connectors: dict[str, int] = field(default_factory=dict)


@dataclass
class MonthlyCost:
    idle: float = 0.0
    normal: float = 0.0
    peak: float = 0.0

    @property
    def total(self) -> float:
        return self.idle + self.normal + self.peak
