from __future__ import annotations

import json

from adapters.json_exporter import export_report_json
from adapters.report_exporter import chart_rows, export_report_html, render_report_html
from core.services.country_pipeline import build_report


def test_export_json(tmp_path, countries):
    report = build_report(countries, query="tokyo", source_url="https://x.test/all")
    out = export_report_json(report=report, output_path=tmp_path / "out" / "report.json")

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["total_countries"] == len(countries)
    assert data["query"] == "tokyo"
    assert [c["name"] for c in data["countries"]] == ["Japan"]
    assert "search_text" not in data["countries"][0]
    assert "all_countries" not in data
    assert data["ranking"][0]["name"] == "World"
    assert data["ranking"][1]["population_display"] == "1,402,112,000"


def test_chart_rows_scale_to_world(countries):
    rows = chart_rows(build_report(countries))
    assert rows[0]["name"] == "World"
    assert rows[0]["percent"] == 100.0
    assert 0 < rows[1]["percent"] < 100


def test_render_html_page(countries):
    html = render_report_html(report=build_report(countries, source_url="https://x.test/all"))

    assert "World Countries Data" in html
    assert f"Currently, there are {len(countries)} countries in total." in html
    assert "Top 10 most populated countries in the world" in html
    assert "Pretoria, Bloemfontein, Cape Town" in html
    assert "Languages:</p> English, Hindi, Tamil" in html
    assert "Currencies:</p> Panamanian balboa, United States dollar" in html
    assert "4,651,902,151" in html
    assert "#05386B" in html
    assert 'src="https://flagcdn.com/ch.svg"' in html


def test_render_html_keeps_every_panel_for_client_side_search(countries):
    report = build_report(countries, query="tokyo")
    html = render_report_html(report=report)

    assert [c.name for c in report.countries] == ["Japan"]
    assert html.count('class="countryPanel"') == len(countries)
    assert html.count('style="display: none"') == len(countries) - 1
    assert 'value="tokyo"' in html
    assert 'id="empty" hidden' in html


def test_render_html_without_matches(countries):
    html = render_report_html(report=build_report(countries, query="atlantis"))

    assert html.count('style="display: none"') == len(countries)
    assert '<p class="empty" id="empty">No countries match' in html


def test_html_escapes_api_text(tmp_path, countries_payload):
    from core.domain.models import Country

    payload = countries_payload[:1]
    payload[0]["capital"] = ["<script>alert(1)</script>"]
    report = build_report([Country.model_validate(r) for r in payload])

    out = export_report_html(report=report, output_path=tmp_path / "page.html")
    html = out.read_text(encoding="utf-8")
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
