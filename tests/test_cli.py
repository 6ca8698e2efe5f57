import json

import pytest
import yaml

from point_grid.cli import main


def test_json_report(write_ply, capsys):
    path = write_ply(["0 0 0", "1 1 1", "2 2 2"])

    code = main([str(path), "--grid-size", "2", "--format", "json"])

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["bucket_count"] == 2
    assert out["buckets"][1] == {"index": [1, 1, 1], "count": 2}


def test_yaml_report_with_points(write_ply, capsys):
    path = write_ply(["0 0 0", "1 1 1", "2 2 2"])

    code = main([str(path), "--grid-size", "2", "--format", "yaml", "--include-points", "--emit-geometry"])

    out = yaml.safe_load(capsys.readouterr().out)
    assert code == 0
    assert out["point_count"] == 3
    assert out["buckets"][0]["points"] == [[0.0, 0.0, 0.0]]


def test_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "missing.ply"), "--format", "json"])

    assert code == 1
    assert "IO_ERROR" in capsys.readouterr().err


def test_parse_failure(write_ply, capsys):
    path = write_ply(["1 2 three"])

    code = main([str(path), "--format", "json"])

    assert code == 1
    assert "PARSE_ERROR" in capsys.readouterr().err


def test_zero_grid_size(write_ply, capsys):
    path = write_ply(["1 2 3", "4 5 6"])

    code = main([str(path), "--grid-size", "0", "--format", "json"])

    assert code == 1
    assert "INVALID_ARGUMENT" in capsys.readouterr().err


def test_unknown_log_level_is_usage_error(write_ply, capsys):
    path = write_ply(["1 2 3"])

    with pytest.raises(SystemExit) as ei:
        main([str(path), "--log-level", "bogus"])

    assert ei.value.code == 2
    assert "unknown log level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(write_ply, capsys):
    path = write_ply(["1 2 3", "4 5 6"])

    assert main([str(path), "--format", "json", "--log-level", "debug"]) == 0
