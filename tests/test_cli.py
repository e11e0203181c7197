from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
import yaml
from typer.testing import CliRunner

from hardscape.cli.main import app
from hardscape.telemetry import read_jsonl

runner = CliRunner()

CATALOG = [
    {
        "id": "t2",
        "name": "Cutting porcelain tiles",
        "unit": "slabs",
        "estimated_hours_per_unit": 0.2,
    },
    {
        "id": "t4",
        "name": "Excavating foundation with shovel",
        "unit": "m3",
        "estimated_hours_per_unit": 1.0,
    },
]


def _write_yaml(path: Path, payload) -> Path:
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def _config(tmp_path: Path) -> Path:
    return _write_yaml(tmp_path / "config.yaml", {"catalog": CATALOG})


def test_calculators_lists_kinds() -> None:
    result = runner.invoke(app, ["calculators"])
    assert result.exit_code == 0
    assert "foundation" in result.stdout
    assert "material_transport" in result.stdout


def test_tables_prints_carriers_and_capacities() -> None:
    result = runner.invoke(app, ["tables"])
    assert result.exit_code == 0
    assert "Carriers" in result.stdout
    assert "Capacity per trip" in result.stdout
    assert "kerbsSmall" in result.stdout


def test_estimate_writes_breakdown_and_reconciliation(tmp_path: Path) -> None:
    inputs = _write_yaml(
        tmp_path / "foundation.yaml",
        {
            "kind": "foundation",
            "length_m": 15,
            "width_m": 0.6,
            "depth_cm": 60,
            "transport": {"carrier_size_t": 1},
        },
    )
    out = tmp_path / "out" / "breakdown.csv"
    materials_out = tmp_path / "out" / "materials.csv"
    log_path = tmp_path / "logs" / "matches.jsonl"
    result = runner.invoke(
        app,
        [
            "estimate",
            str(inputs),
            "--config",
            str(_config(tmp_path)),
            "--reconcile",
            "--out",
            str(out),
            "--materials-out",
            str(materials_out),
            "--telemetry-log",
            str(log_path),
        ],
    )
    assert result.exit_code == 0, result.stdout

    breakdown = pd.read_csv(out)
    assert breakdown["task"].tolist() == ["Foundation Excavation", "transport soil"]
    assert breakdown["hours"].iloc[0] == pytest.approx(12.0)

    reconciled = pd.read_csv(tmp_path / "out" / "breakdown_reconciled.csv")
    assert reconciled["resolved_name"].iloc[0] == "Excavating foundation with shovel"
    assert reconciled["strategy"].tolist() == ["exact", "none"]

    materials = pd.read_csv(materials_out)
    assert materials["material"].tolist() == [
        "Excavated Clay Soil (loose volume)",
        "Aggregate (for concrete)",
    ]

    records = read_jsonl(log_path)
    assert len(records) == 2
    assert records[0]["context"]["calculator"] == "foundation"


def test_estimate_rejects_invalid_input(tmp_path: Path) -> None:
    inputs = _write_yaml(
        tmp_path / "bad.yaml", {"kind": "foundation", "length_m": -1, "width_m": 1, "depth_cm": 10}
    )
    result = runner.invoke(app, ["estimate", str(inputs)])
    assert result.exit_code == 1
    assert "Invalid input" in result.stdout


def test_estimate_missing_input_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["estimate", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Missing input file" in result.stdout


def test_estimate_missing_config(tmp_path: Path) -> None:
    inputs = _write_yaml(
        tmp_path / "mortar.yaml", {"kind": "mortar", "variant": "slab", "area_m2": 2}
    )
    result = runner.invoke(
        app, ["estimate", str(inputs), "--config", str(tmp_path / "absent.yaml")]
    )
    assert result.exit_code == 1
    assert "Missing configuration file" in result.stdout


def test_match_porcelain_cutting(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "match",
            "cutting slabs",
            "--config",
            str(_config(tmp_path)),
            "--parent",
            "Porcelain patio",
        ],
    )
    assert result.exit_code == 0
    assert "Resolved as: cutting porcelain" in result.stdout
    assert "Matched: Cutting porcelain tiles" in result.stdout
    assert "Strategy: domain-specific" in result.stdout


def test_match_without_template_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, ["match", "Planting trees", "--config", str(_config(tmp_path))])
    assert result.exit_code == 1
    assert "No template matched" in result.stdout


def test_malformed_config_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("catalog: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["tables", "--config", str(cfg_path)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_malformed_input_yaml(tmp_path: Path) -> None:
    inputs = tmp_path / "inputs.yaml"
    inputs.write_text("kind: [foundation\n", encoding="utf-8")
    result = runner.invoke(app, ["estimate", str(inputs)])
    assert result.exit_code == 1
    assert "Invalid input file" in result.stdout
