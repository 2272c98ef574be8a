import os

from compatibility import evaluate_compatibility
from models import Part, PartSelection, PowerProfile
from output.html import render_html_report, update_index
from power import estimate_monthly_cost, evaluate_power
from sample_parts import sample_build


def test_render_html_report_creates_file(tmp_path):
    selection = sample_build()
    power = evaluate_power(selection)
    cost = estimate_monthly_cost(power, 8, 31)
    filepath = render_html_report(
        selection, evaluate_compatibility(selection), power,
        output_dir=str(tmp_path), cost=cost,
    )
    assert os.path.exists(filepath)
    assert os.path.basename(filepath).startswith("build_")
    with open(filepath) as f:
        content = f.read()
    assert "Corsair RM750x 750W 80+ Gold" in content
    assert "100/100" in content
    assert "600W" in content
    assert "Monthly Electricity" in content
    assert 'class="green"' in content


def test_render_html_report_empty_selection(tmp_path):
    selection = PartSelection()
    filepath = render_html_report(
        selection, evaluate_compatibility(selection), evaluate_power(selection),
        output_dir=str(tmp_path),
    )
    with open(filepath) as f:
        content = f.read()
    assert "No parts selected." in content
    assert 'class="yellow"' in content


def test_render_html_report_escapes_names(tmp_path):
    selection = PartSelection.from_parts([Part("x", "<script>alert(1)</script>", "other")])
    filepath = render_html_report(
        selection, evaluate_compatibility(selection), evaluate_power(selection),
        output_dir=str(tmp_path),
    )
    with open(filepath) as f:
        content = f.read()
    assert "<script>alert" not in content
    assert "&lt;script&gt;" in content


def test_update_index(tmp_path):
    report = tmp_path / "build_2026-02-15_140000.html"
    report.write_text("<html></html>")
    (tmp_path / "notes.html").write_text("<html></html>")
    update_index(str(tmp_path))
    index = tmp_path / "index.html"
    assert index.exists()
    text = index.read_text()
    assert "build_2026-02-15_140000.html" in text
    assert "notes.html" not in text


def test_draw_column_follows_category_not_part_id(tmp_path):
    selection = PartSelection.from_parts([
        Part("dup", "Custom CPU", "cpu", power=PowerProfile(5, 60, 111, 85)),
        Part("dup", "Custom GPU", "gpu", power=PowerProfile(10, 150, 222, 80)),
    ])
    filepath = render_html_report(
        selection, evaluate_compatibility(selection), evaluate_power(selection),
        output_dir=str(tmp_path),
    )
    with open(filepath) as f:
        content = f.read()
    assert "<td>111</td>" in content
    assert "<td>222</td>" in content
