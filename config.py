"""Configuration for the PC build checker."""
from dataclasses import dataclass, field


@dataclass
class Config:
    # Parts that must be selected before a build can be called compatible
    required_categories: list[str] = field(
        default_factory=lambda: ["cpu", "motherboard", "memory", "psu"]
    )

    # Score penalties (charged once per check that is waiting or failing)
    check_weights: dict[str, int] = field(default_factory=lambda: {
        "socket": 30,
        "memory": 25,
        "connectors": 20,
        "physical": 15,
        "performance": 5,
    })
    issue_penalty: int = 10  # per raised issue, missing parts excluded
    warning_penalty: int = 2

    # Memory
    default_max_memory_gb: int = 128
    recommended_memory_gb: int = 16

    # Physical fit
    gpu_length_warning_ratio: float = 0.90
    cooler_height_warning_ratio: float = 0.95
    clearance_gpu_length_mm: int = 300
    clearance_cooler_height_mm: int = 160

    # Performance balance (gpu price / cpu price), symmetric around 1
    balance_low_ratio: float = 0.5
    balance_high_ratio: float = 2.0

    # Power
    safety_margin: float = 0.2
    psu_step_watts: int = 50
    default_psu_capacity: int = 500
    oversized_psu_factor: float = 1.8
    optimal_capacity_factor: float = 1.4
    optimal_load_min: float = 50.0
    optimal_load_max: float = 80.0
    high_load_percentage: float = 90.0
    high_gpu_power_watts: int = 300

    # Running cost
    usage_hours_per_day: float = 8.0
    electricity_rate: float = 31.0  # currency units per kWh

    # Output
    results_dir: str = "results"
