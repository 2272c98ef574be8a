"""HTML build report with dark theme."""

import os
import glob
from datetime import datetime

from jinja2 import Template

from display_names import category_title, shorten_part_name
from models import (
    CompatibilityResult, MonthlyCost, PartSelection, PowerResult,
    STATUS_COMPATIBLE, STATUS_WAITING,
)


HTML_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>PC Build Report - {{ generated_at }}</title>
<style>
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body {
    background: #1a1a2e;
    color: #e0e0e0;
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    padding: 20px;
  }
  h1 { color: #00d4ff; margin-bottom: 10px; }
  h2 { color: #00d4ff; margin: 20px 0 10px; font-size: 1.2em; }
  .summary {
    background: #16213e;
    border: 1px solid #0f3460;
    border-radius: 8px;
    padding: 15px 20px;
    margin-bottom: 20px;
    display: flex;
    gap: 30px;
    flex-wrap: wrap;
  }
  .summary .stat {
    display: flex;
    flex-direction: column;
  }
  .summary .stat .label {
    font-size: 0.8em;
    color: #888;
    text-transform: uppercase;
  }
  .summary .stat .value {
    font-size: 1.3em;
    font-weight: bold;
    color: #00d4ff;
  }
  .meta {
    color: #666;
    font-size: 0.85em;
    margin-bottom: 15px;
  }
  table {
    width: 100%;
    border-collapse: collapse;
    background: #16213e;
    border-radius: 8px;
    overflow: hidden;
  }
  th {
    background: #0f3460;
    color: #00d4ff;
    padding: 10px 8px;
    text-align: left;
    white-space: nowrap;
  }
  td {
    padding: 8px;
    border-bottom: 1px solid #1a1a2e;
  }
  tr:hover { background: #1a2a4e; }
  tr.green td { background: rgba(0, 200, 83, 0.15); }
  tr.yellow td { background: rgba(255, 193, 7, 0.15); }
  tr.red td { background: rgba(255, 82, 82, 0.15); }
  ul.notes { list-style: none; }
  ul.notes li { padding: 6px 0; border-bottom: 1px solid #0f3460; }
  .critical, .high { color: #ff5252; }
  .medium { color: #ffc107; }
  .low { color: #888; }
  .no-parts {
    text-align: center;
    padding: 40px;
    color: #666;
    font-size: 1.2em;
  }
</style>
</head>
<body>
<h1>PC Build Report</h1>
<div class="meta">Generated: {{ generated_at }} | Parts: {{ parts|length }}</div>

<div class="summary">
  <div class="stat">
    <span class="label">Compatibility Score</span>
    <span class="value">{{ compatibility.score }}/100</span>
  </div>
  <div class="stat">
    <span class="label">Status</span>
    <span class="value">{{ "Compatible" if compatibility.is_compatible else "Incomplete / incompatible" }}</span>
  </div>
  <div class="stat">
    <span class="label">Total Price</span>
    <span class="value">{{ "{:,}".format(total_price) }}</span>
  </div>
  <div class="stat">
    <span class="label">Peak Power</span>
    <span class="value">{{ "%.0f"|format(power.total_max_power) }}W</span>
  </div>
  <div class="stat">
    <span class="label">Recommended PSU</span>
    <span class="value">{{ power.recommended_psu }}W</span>
  </div>
  {% if cost %}
  <div class="stat">
    <span class="label">Monthly Electricity</span>
    <span class="value">{{ "{:,.0f}".format(cost.total) }}</span>
  </div>
  {% endif %}
</div>

{% if parts %}
<table id="partsTable">
<thead>
<tr>
  <th>Category</th>
  <th>Part</th>
  <th>Manufacturer</th>
  <th>Price</th>
  <th>Max W</th>
</tr>
</thead>
<tbody>
{% for row in parts %}
<tr>
  <td>{{ row.category }}</td>
  <td>{{ row.name }}</td>
  <td>{{ row.manufacturer or "—" }}</td>
  <td>{{ "{:,}".format(row.price) }}</td>
  <td>{{ row.max_power }}</td>
</tr>
{% endfor %}
</tbody>
</table>
{% else %}
<div class="no-parts">No parts selected.</div>
{% endif %}

<h2>Compatibility checks</h2>
<table id="checksTable">
<thead>
<tr><th>Check</th><th>Status</th><th>Details</th></tr>
</thead>
<tbody>
{% for check in checks %}
<tr class="{{ check.row_class }}">
  <td>{{ check.name }}</td>
  <td>{{ check.status }}</td>
  <td>{{ check.message }}</td>
</tr>
{% endfor %}
</tbody>
</table>

{% if compatibility.issues or compatibility.warnings %}
<h2>Issues and warnings</h2>
<ul class="notes">
{% for issue in compatibility.issues %}
  <li class="{{ issue.severity }}">✗ {{ issue.message }} ({{ issue.solution }})</li>
{% endfor %}
{% for warning in compatibility.warnings %}
  <li class="{{ warning.priority }}">! {{ warning.message }}</li>
{% endfor %}
</ul>
{% endif %}

{% if power.warnings %}
<h2>Power warnings</h2>
<ul class="notes">
{% for warning in power.warnings %}
  <li class="{{ warning.severity }}">! {{ warning.message }} ({{ warning.suggestion }})</li>
{% endfor %}
</ul>
{% endif %}
</body>
</html>
""", autoescape=True)


INDEX_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>PC Build Reports Index</title>
<style>
  body {
    background: #1a1a2e;
    color: #e0e0e0;
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    padding: 20px;
  }
  h1 { color: #00d4ff; margin-bottom: 20px; }
  ul { list-style: none; padding: 0; }
  li {
    padding: 8px 0;
    border-bottom: 1px solid #0f3460;
  }
  a { color: #00d4ff; text-decoration: none; font-size: 1.1em; }
  a:hover { text-decoration: underline; }
</style>
</head>
<body>
<h1>PC Build Reports</h1>
<ul>
{% for report in reports %}
  <li><a href="{{ report }}">{{ report }}</a></li>
{% endfor %}
</ul>
{% if not reports %}
<p>No reports found.</p>
{% endif %}
</body>
</html>
""", autoescape=True)


def _part_rows(selection: PartSelection, power: PowerResult) -> list[dict]:
    draw = {c.category: c.max_power for c in power.consumptions}
    rows = []
    for category, part in selection.items():
        max_power = draw.get(category)
        rows.append({
            "category": category_title(category),
            "name": shorten_part_name(part.name),
            "manufacturer": part.manufacturer,
            "price": part.price,
            "max_power": f"{max_power:.0f}" if max_power is not None else "—",
        })
    return rows


def _check_rows(compatibility: CompatibilityResult) -> list[dict]:
    """One row per check, classed by status for row colouring."""
    rows = []
    for name, check in compatibility.details.all():
        if check.status == STATUS_COMPATIBLE:
            row_class = "green"
        elif check.status == STATUS_WAITING:
            row_class = "yellow"
        else:
            row_class = "red"
        rows.append({
            "name": name,
            "status": check.status,
            "message": check.message,
            "row_class": row_class,
        })
    return rows


def render_html_report(
    selection: PartSelection,
    compatibility: CompatibilityResult,
    power: PowerResult,
    output_dir: str = "results",
    cost: MonthlyCost | None = None,
) -> str:
    """Render a build evaluation to a timestamped HTML report file.

    Args:
        selection: The evaluated part selection.
        compatibility: Result of evaluate_compatibility for the selection.
        power: Result of evaluate_power for the selection.
        output_dir: Directory to write the HTML file into.
        cost: Optional monthly electricity estimate.

    Returns:
        Path to the generated HTML file.
    """
    os.makedirs(output_dir, exist_ok=True)

    now = datetime.now()
    generated_at = now.strftime("%Y-%m-%d %H:%M:%S")
    filename = f"build_{now.strftime('%Y-%m-%d_%H%M%S')}.html"
    filepath = os.path.join(output_dir, filename)

    html = HTML_TEMPLATE.render(
        parts=_part_rows(selection, power),
        checks=_check_rows(compatibility),
        compatibility=compatibility,
        power=power,
        cost=cost,
        total_price=selection.total_price(),
        generated_at=generated_at,
    )

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(html)

    return filepath


def update_index(output_dir: str = "results") -> str:
    """Generate an index.html listing all build reports in the output directory.

    Args:
        output_dir: Directory containing report HTML files.

    Returns:
        Path to the generated index.html.
    """
    pattern = os.path.join(output_dir, "build_*.html")
    report_files = sorted(
        [os.path.basename(f) for f in glob.glob(pattern)],
        reverse=True,
    )

    html = INDEX_TEMPLATE.render(reports=report_files)

    index_path = os.path.join(output_dir, "index.html")
    with open(index_path, "w", encoding="utf-8") as f:
        f.write(html)

    return index_path
