"""Display labels for categories and shortened part names for reports."""
import re

_CATEGORY_LABELS = {
    "cpu": "CPU",
    "gpu": "graphics card",
    "motherboard": "motherboard",
    "memory": "memory kit",
    "storage": "storage drive",
    "psu": "power supply",
    "case": "PC case",
    "cooler": "CPU cooler",
    "monitor": "monitor",
    "other": "accessory",
}


def category_label(category: str) -> str:
    return _CATEGORY_LABELS.get(category, category)


def category_title(category: str) -> str:
    """Label for table headers: 'CPU', 'Graphics card', 'Power supply'."""
    label = category_label(category)
    return label if label.isupper() else label[:1].upper() + label[1:]


def shorten_part_name(name: str) -> str:
    """Shorten a retailer listing title to brand + model.

    "AMD Ryzen 7 7800X3D - Ryzen 7000 Series 8-Core 5.0GHz ..." -> "AMD Ryzen 7 7800X3D"
    "Corsair RM750x 750W, 80+ Gold, Fully Modular" -> "Corsair RM750x 750W"
    """
    if not name:
        return name
    # Cut at first " - " delimiter or comma (feature lists)
    short = name.split(" - ")[0].split(",")[0].strip()
    # Strip trailing SKU codes like "100-100000910WOF"
    short = re.sub(r"\s+\d{3}-\d{9,}\w*$", "", short)
    # Strip trailing parenthetical notes like "(Retail Box)"
    short = re.sub(r"\s*\([^)]*\)\s*$", "", short)
    return " ".join(short.split())
