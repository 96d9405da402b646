import pytest

from masonry_core.__main__ import main
from masonry_core.models import Adaptive, Axis, Fixed, PlacementPolicy
from masonry_core.scenario import load_scenario, scenario_from_data

SCENARIO = """\
axis: vertical
lines: 2
spacing: 0
placement: fill
container:
  width: 200
  height: 0
items:
  - 10
  - {extent: 20, key: tall}
  - 10
  - 30
  - {extent: 10, span: 2}
"""


def test_load_scenario(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text(SCENARIO, encoding="utf-8")
    scenario = load_scenario(path)
    assert scenario.config.axis is Axis.VERTICAL
    assert scenario.config.lines == Fixed(2)
    assert scenario.container.width == 200
    assert scenario.items[1].key == "tall"
    assert scenario.items[4].span == Fixed(2)


def test_scenario_overrides_and_defaults():
    scenario = scenario_from_data(
        {"axis": "horizontal", "lines": "min=80", "items": []}, placement="order"
    )
    assert scenario.config.axis is Axis.HORIZONTAL
    assert scenario.config.lines == Adaptive(minimum=80)
    assert scenario.config.placement is PlacementPolicy.ORDER
    assert scenario.config.spacing.horizontal == 8.0


def test_scenario_item_needs_extent():
    with pytest.raises(ValueError):
        scenario_from_data({"items": [{"span": 2}]})


def test_cli_prints_placements(tmp_path, capsys):
    path = tmp_path / "scenario.yaml"
    path.write_text(SCENARIO, encoding="utf-8")

    assert main([str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[1] == "tall: line 1 span 1 at (100.00, 0.00) size 100.00 x 20.00"
    assert out[4] == "4: line 0 span 2 at (0.00, 50.00) size 200.00 x 10.00"
    assert out[-1] == "content 200.00 x 60.00 (2 lines, 2 passes)"


def test_cli_writes_preview(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text(SCENARIO, encoding="utf-8")
    preview = tmp_path / "preview.png"

    assert main([str(path), "--placement", "order", "--preview", str(preview)]) == 0
    assert preview.exists()


def test_cli_reports_bad_scenario(tmp_path, caplog):
    path = tmp_path / "broken.yaml"
    path.write_text("axis: diagonal\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Failed to load scenario" in caplog.text
