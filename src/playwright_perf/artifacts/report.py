from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from jinja2 import Template
from markupsafe import Markup

from playwright_perf.analysis.models import PerformanceSummary

from .summary import build_summary


_REPORT_TEMPLATE = """{% macro records_table(records, show_file) %}
{% if records %}
<table>
  <thead><tr><th>#</th><th class="num">Duration</th><th>Test</th><th>Status</th>{% if show_file %}<th>File</th>{% endif %}</tr></thead>
  <tbody>
  {% for item in records %}
    <tr>
      <td>{{ loop.index }}</td>
      <td class="num">{{ seconds(item.duration_ms) }}</td>
      <td>{{ item.suite }} &rsaquo; {{ item.name }}</td>
      <td><span class="status {{ item.status }}">{{ item.status }}</span></td>
      {% if show_file %}<td>{{ item.file }}</td>{% endif %}
    </tr>
  {% endfor %}
  </tbody>
</table>
{% else %}
<p class="empty">None.</p>
{% endif %}
{% endmacro -%}
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Test Performance Analysis</title>
  <style>
    :root {
      --bg: #f5efe6;
      --ink: #1f2a30;
      --muted: #5b6b75;
      --accent: #1f7a8c;
      --card: #fffaf3;
      --border: rgba(31, 42, 48, 0.12);
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      font-family: "Space Grotesk", "Avenir Next", "Trebuchet MS", sans-serif;
      color: var(--ink);
      background: var(--bg);
    }
    header, main {
      max-width: 1100px;
      margin: 0 auto;
      padding: 24px;
    }
    h1 { margin: 0; letter-spacing: -0.02em; }
    .subtitle { color: var(--muted); margin-top: 6px; }
    main { display: grid; gap: 24px; padding-top: 0; }
    .grid {
      display: grid;
      gap: 16px;
      grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
    }
    .card {
      background: var(--card);
      border: 1px solid var(--border);
      border-radius: 14px;
      padding: 16px;
    }
    .card h3 {
      margin: 0 0 6px;
      font-size: 13px;
      color: var(--muted);
      text-transform: uppercase;
      letter-spacing: 0.08em;
    }
    .card .value { font-size: 24px; font-weight: 600; }
    table { width: 100%; border-collapse: collapse; font-size: 14px; }
    th, td { text-align: left; padding: 8px 10px; border-bottom: 1px solid var(--border); }
    td.num, th.num { text-align: right; }
    .status { font-weight: 700; text-transform: uppercase; font-size: 12px; }
    .status.passed { color: #1b7f5a; }
    .status.failed { color: #c0392b; }
    .empty { color: var(--muted); font-style: italic; }
  </style>
</head>
<body>
  <header>
    <h1>Test Performance Analysis</h1>
    <div class="subtitle">{{ data.report_path }} &bull; generated {{ data.generated_at }}</div>
  </header>
  <main>
    <section class="grid">
      <div class="card"><h3>Total Tests</h3><div class="value">{{ data.totals.tests }}</div></div>
      <div class="card"><h3>Passed</h3><div class="value">{{ data.totals.passed }}</div></div>
      <div class="card"><h3>Failed</h3><div class="value">{{ data.totals.failed }}</div></div>
      <div class="card"><h3>Total Duration</h3><div class="value">{{ seconds(data.totals.duration_ms) }}</div></div>
      <div class="card"><h3>Average Duration</h3><div class="value">{{ seconds(data.totals.average_ms) }}</div></div>
    </section>
    {% if not data.totals.tests %}
    <section class="card"><p class="empty">No tests found in report.</p></section>
    {% else %}
    <section class="card">
      <h2>Slowest Tests (&gt; {{ data.thresholds.slow_ms }} ms)</h2>
      {{ records_table(data.slow, True) }}
    </section>
    <section class="card">
      <h2>Fastest Tests (&lt; {{ data.thresholds.fast_ms }} ms)</h2>
      {{ records_table(data.fast, False) }}
    </section>
    <section class="card">
      <h2>Performance by Test File</h2>
      <table>
        <thead><tr><th>File</th><th class="num">Tests</th><th class="num">Total</th><th class="num">Avg</th></tr></thead>
        <tbody>
        {% for item in data.by_file %}
          <tr>
            <td>{{ item.file }}</td>
            <td class="num">{{ item.tests }}</td>
            <td class="num">{{ seconds(item.duration_ms) }}</td>
            <td class="num">{{ seconds(item.average_ms) }}</td>
          </tr>
        {% endfor %}
        </tbody>
      </table>
    </section>
    {% endif %}
  </main>
  <script id="perf-data" type="application/json">{{ data_json }}</script>
</body>
</html>
"""


def _seconds(duration_ms: float | None) -> str:
    if duration_ms is None:
        return "n/a"
    return f"{duration_ms / 1000:.2f}s"


def write_html_report(
    path: Path,
    summary: PerformanceSummary,
    *,
    report_path: Path,
    generated_at: datetime | None = None,
) -> Path:
    data = build_summary(summary, report_path=report_path, generated_at=generated_at)
    data_json = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
    html = Template(_REPORT_TEMPLATE, autoescape=True).render(
        data=data,
        data_json=Markup(data_json),
        seconds=_seconds,
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
