import json

import pandas as pd
from typer.testing import CliRunner

from netlat.cli import app


runner = CliRunner()


def test_shortest_path(sample_file):
    r = runner.invoke(app, ["shortest-path", str(sample_file), "0", "1"])
    assert r.exit_code == 0, r.output
    assert "69.57" in r.output
    assert "The total bandwidth: 200" in r.output


def test_copper_and_resilience(sample_file):
    r = runner.invoke(app, ["copper", str(sample_file)])
    assert r.exit_code == 0, r.output
    assert "can be connected with only copper" in r.output

    r = runner.invoke(app, ["resilience", str(sample_file)])
    assert r.exit_code == 0, r.output
    assert "survive" in r.output

    r = runner.invoke(app, ["resilience", str(sample_file), "--min-degree", "4"])
    assert r.exit_code == 0, r.output
    assert "disconnected" in r.output


def test_spanning_tree_csv(sample_file, tmp_path):
    out_csv = tmp_path / "tree.csv"
    r = runner.invoke(app, ["spanning-tree", str(sample_file), "--out-csv", str(out_csv)])
    assert r.exit_code == 0, r.output
    assert "34.783" in r.output
    assert len(pd.read_csv(out_csv)) == 4


def test_summary_json(sample_file, tmp_path):
    out_json = tmp_path / "report.json"
    r = runner.invoke(app, ["summary", str(sample_file), "0", "1", "--out-json", str(out_json)])
    assert r.exit_code == 0, r.output
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["shortest_path"]["bandwidth"] == 200


def test_menu(sample_file):
    r = runner.invoke(app, ["menu", str(sample_file)], input="1\n0\n1\n4\n5\n")
    assert r.exit_code == 0, r.output
    assert "The total bandwidth: 200" in r.output
    assert "survive" in r.output


def test_bad_vertex_exits_nonzero(sample_file):
    r = runner.invoke(app, ["shortest-path", str(sample_file), "0", "9"])
    assert r.exit_code == 1
    assert "not between 0 and 4" in r.output


def test_missing_file(tmp_path):
    r = runner.invoke(app, ["copper", str(tmp_path / "missing.txt")])
    assert r.exit_code != 0


def test_undecodable_file_is_reported_without_traceback(tmp_path):
    p = tmp_path / "network.txt"
    p.write_bytes(b"2\n0 1 copper 100 8\n\xff\n")
    r = runner.invoke(app, ["copper", str(p)])
    assert r.exit_code == 1
    assert isinstance(r.exception, SystemExit)
    assert "UTF-8" in r.output


def test_bad_header_is_reported_without_traceback(tmp_path):
    p = tmp_path / "network.txt"
    p.write_text("²\n", encoding="utf-8")
    r = runner.invoke(app, ["copper", str(p)])
    assert r.exit_code == 1
    assert isinstance(r.exception, SystemExit)


def test_directory_instead_of_file(tmp_path):
    r = runner.invoke(app, ["copper", str(tmp_path)])
    assert r.exit_code == 2
    assert isinstance(r.exception, SystemExit)


def test_mistyped_config_value(sample_file, tmp_path):
    cfg = tmp_path / "netlat.json"
    cfg.write_text(json.dumps({"failure_min_degree": None}), encoding="utf-8")
    r = runner.invoke(app, ["resilience", str(sample_file), "--config", str(cfg)])
    assert r.exit_code == 2
    assert isinstance(r.exception, SystemExit)


def test_strict_copper_flag(tmp_path):
    p = tmp_path / "islands.txt"
    p.write_text("4\n0 1 copper 1 1\n2 3 copper 1 1\n1 2 optical 1 1\n", encoding="utf-8")
    r = runner.invoke(app, ["copper", str(p)])
    assert r.exit_code == 0, r.output
    assert "can be connected with only copper" in r.output

    r = runner.invoke(app, ["copper", str(p), "--strict-copper"])
    assert r.exit_code == 0, r.output
    assert "cannot be connected" in r.output


def test_lenient_flag_skips_bad_rows(tmp_path):
    p = tmp_path / "network.txt"
    p.write_text("2\n0 1 copper 100 8\n0 1 plastic 1 1\n", encoding="utf-8")
    r = runner.invoke(app, ["shortest-path", str(p), "0", "1"])
    assert r.exit_code == 1
    assert "plastic" in r.output

    r = runner.invoke(app, ["shortest-path", str(p), "0", "1", "--lenient"])
    assert r.exit_code == 0, r.output
    assert "The total bandwidth: 100" in r.output
