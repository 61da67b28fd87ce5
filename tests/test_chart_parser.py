"""Tests for chart_colour.core.chart_parser — JSON chart descriptions to shape properties."""

import json
import os

import pytest
from chart_colour.core.chart_parser import parse_chart_file, parse_chart_string
from chart_colour.core.types import LiteralColour, SchemeColour, SolidFill

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
LINE_CHART = os.path.join(FIXTURES_DIR, 'line_chart.json')
BAR_CHART = os.path.join(FIXTURES_DIR, 'bar_chart.json')


class TestParseChartFile:
    def test_name(self):
        assert parse_chart_file(LINE_CHART).name == 'monthly-sales'

    def test_line_chart_flag(self):
        assert parse_chart_file(LINE_CHART).line_chart is True
        assert parse_chart_file(BAR_CHART).line_chart is False

    def test_series_count(self):
        assert len(parse_chart_file(LINE_CHART).series) == 5

    def test_plot_area_fill(self):
        chart = parse_chart_file(LINE_CHART)
        assert chart.plot_area.solid_fill == SolidFill(scheme=SchemeColour(slot='bg1', lum_mod=95000))

    def test_line_fill(self):
        chart = parse_chart_file(LINE_CHART)
        assert chart.series[0].line_fill().scheme == SchemeColour(slot='accent2', lum_off=40000)

    def test_null_series(self):
        assert parse_chart_file(LINE_CHART).series[2] is None

    def test_hex_literal(self):
        chart = parse_chart_file(LINE_CHART)
        assert chart.series[1].line_fill().srgb == LiteralColour(rgb_bytes=b'\xff\x00\x00', alpha=50000)

    def test_list_literal(self):
        chart = parse_chart_file(BAR_CHART)
        assert chart.series[0].solid_fill.srgb.rgb_bytes == [-1, -128, 127]

    def test_embedded_theme(self):
        chart = parse_chart_file(BAR_CHART)
        assert chart.theme['accent1'] == '#0A141E'

    def test_no_theme(self):
        assert parse_chart_file(LINE_CHART).theme is None

    def test_name_defaults_to_path(self, tmp_path) -> None:
        f = tmp_path / 'anon.json'
        f.write_text('{}')
        assert parse_chart_file(str(f)).name == str(f)


class TestParseChartString:
    def test_scheme_shorthand(self):
        chart = parse_chart_string('{"series": [{"solid_fill": {"scheme": "accent5"}}]}')
        assert chart.series[0].solid_fill.scheme == SchemeColour(slot='accent5')

    def test_literal_shorthand(self):
        chart = parse_chart_string('{"series": [{"solid_fill": {"srgb": "#00FF00"}}]}')
        assert chart.series[0].solid_fill.srgb.rgb_bytes == b'\x00\xff\x00'

    def test_bad_hex_kept_for_resolver(self):
        chart = parse_chart_string('{"series": [{"solid_fill": {"srgb": "zz"}}]}')
        assert chart.series[0].solid_fill.srgb.rgb_bytes == 'zz'

    def test_unreadable_fill_dropped(self):
        chart = parse_chart_string('{"plot_area": {"solid_fill": 7}}')
        assert chart.plot_area.solid_fill is None

    def test_unreadable_series_block(self):
        chart = parse_chart_string('{"series": ["oops", {}]}')
        assert chart.series[0] is None
        assert chart.series[1].solid_fill is None
        assert chart.series[1].line is None

    def test_empty_line_block(self):
        chart = parse_chart_string('{"series": [{"line": {}}]}')
        assert chart.series[0].line is not None
        assert chart.series[0].line_fill() is None

    def test_invalid_json(self):
        with pytest.raises(ValueError, match='invalid chart JSON'):
            parse_chart_string('{')

    def test_not_object(self):
        with pytest.raises(ValueError, match='JSON object'):
            parse_chart_string('[]')

    @pytest.mark.parametrize('series', [{}, 0, '', False, 'abc'])
    def test_series_not_list(self, series):
        with pytest.raises(ValueError, match='series'):
            parse_chart_string(json.dumps({'series': series}))

    def test_series_missing_or_null(self):
        assert parse_chart_string('{}').series == []
        assert parse_chart_string('{"series": null}').series == []

    def test_unreadable_slot_dropped(self):
        chart = parse_chart_string('{"series": [{"solid_fill": {"scheme": {"slot": ["accent1"], "lum_off": 5}}}]}')
        assert chart.series[0].solid_fill.scheme == SchemeColour(slot=None, lum_off=5)

    def test_theme_not_object(self):
        with pytest.raises(ValueError, match='theme'):
            parse_chart_string('{"theme": "office"}')
