"""Sample parts catalog used for the demo build and in tests."""
from models import Part, PartSelection

SAMPLE_PARTS = [
    Part(
        id="intel-i5-13600k",
        name="Intel Core i5-13600K",
        category="cpu",
        manufacturer="Intel",
        price=48000,
        specifications={"socket": "LGA1700", "cores": 14, "threads": 20, "tdp": 125},
    ),
    Part(
        id="amd-ryzen-7-7800x3d",
        name="AMD Ryzen 7 7800X3D",
        category="cpu",
        manufacturer="AMD",
        price=62000,
        specifications={"socket": "AM5", "cores": 8, "threads": 16, "tdp": 120},
    ),
    Part(
        id="asus-prime-z790-p",
        name="ASUS PRIME Z790-P",
        category="motherboard",
        manufacturer="ASUS",
        price=32000,
        specifications={
            "socket": "LGA1700",
            "chipset": "Z790",
            "formFactor": "ATX",
            "memoryType": ["DDR5"],
            "maxMemory": 128,
            "cpuPowerConnector": "8pin",
        },
    ),
    Part(
        id="msi-b650m-mortar",
        name="MSI MAG B650M MORTAR WIFI",
        category="motherboard",
        manufacturer="MSI",
        price=28000,
        specifications={
            "socket": "AM5",
            "chipset": "B650",
            "formFactor": "Micro-ATX",
            "memoryType": ["DDR5"],
            "maxMemory": 192,
            "cpuPowerConnector": "8pin",
        },
    ),
    Part(
        id="rtx-4070",
        name="NVIDIA GeForce RTX 4070",
        category="gpu",
        manufacturer="NVIDIA",
        price=90000,
        specifications={"length": 285, "powerConnectors": ["8pin"]},
    ),
    Part(
        id="rx-7900xtx",
        name="AMD Radeon RX 7900 XTX",
        category="gpu",
        manufacturer="AMD",
        price=160000,
        specifications={"length": 320, "powerConnectors": ["8pin", "8pin"]},
    ),
    Part(
        id="corsair-vengeance-ddr5-32gb",
        name="Corsair Vengeance DDR5-5600 32GB (2x16GB)",
        category="memory",
        manufacturer="Corsair",
        price=15000,
        specifications={"type": "DDR5", "capacity": 32, "modules": 2, "speed": 5600},
    ),
    Part(
        id="samsung-990-pro-1tb",
        name="Samsung 990 PRO 1TB",
        category="storage",
        manufacturer="Samsung",
        price=18000,
        specifications={"type": "NVMe", "capacity": 1000, "interface": "PCIe 4.0"},
    ),
    Part(
        id="corsair-rm750x",
        name="Corsair RM750x 750W 80+ Gold",
        category="psu",
        manufacturer="Corsair",
        price=15000,
        specifications={
            "capacity": 750,
            "efficiency": "80+ Gold",
            "connectors": {"24pin": 1, "4+4pin": 2, "6+2pin": 4, "sata": 8},
        },
    ),
    Part(
        id="fractal-pop-air",
        name="Fractal Design Pop Air",
        category="case",
        manufacturer="Fractal Design",
        price=12000,
        specifications={
            "supportedFormFactors": ["ATX", "Micro-ATX", "Mini-ITX"],
            "maxGpuLength": 405,
            "maxCoolerHeight": 170,
        },
    ),
    Part(
        id="noctua-nh-u12s",
        name="Noctua NH-U12S",
        category="cooler",
        manufacturer="Noctua",
        price=9000,
        specifications={"type": "air", "height": 158},
    ),
]


def find_part(part_id: str) -> Part | None:
    for part in SAMPLE_PARTS:
        if part.id == part_id:
            return part
    return None


def sample_build() -> PartSelection:
    """A complete, compatible LGA1700 gaming build."""
    ids = [
        "intel-i5-13600k", "asus-prime-z790-p", "rtx-4070",
        "corsair-vengeance-ddr5-32gb", "samsung-990-pro-1tb",
        "corsair-rm750x", "fractal-pop-air", "noctua-nh-u12s",
    ]
    return PartSelection.from_parts([find_part(i) for i in ids])
