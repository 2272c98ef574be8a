# tests/test_display_names.py
from display_names import category_label, category_title, shorten_part_name


def test_category_label():
    assert category_label("psu") == "power supply"
    assert category_label("cpu") == "CPU"
    assert category_label("widget") == "widget"


def test_category_title():
    assert category_title("gpu") == "Graphics card"
    assert category_title("cpu") == "CPU"
    assert category_title("other") == "Accessory"


def test_shorten_cuts_feature_list():
    name = "AMD Ryzen 7 7800X3D - Ryzen 7000 Series 8-Core 5.0GHz Socket AM5"
    assert shorten_part_name(name) == "AMD Ryzen 7 7800X3D"
    assert shorten_part_name("Corsair RM750x 750W, 80+ Gold, Fully Modular") == "Corsair RM750x 750W"


def test_shorten_strips_sku_and_parenthetical():
    assert shorten_part_name("AMD Ryzen 5 7600X 100-100000593WOF") == "AMD Ryzen 5 7600X"
    assert shorten_part_name("Intel Core i5-13600K (Retail Box)") == "Intel Core i5-13600K"


def test_shorten_keeps_plain_names():
    assert shorten_part_name("Noctua NH-U12S") == "Noctua NH-U12S"
    assert shorten_part_name("") == ""
