# SPDX-License-Identifier: Apache-2.0
import json
import subprocess
import sys

import pytest

from landtemp.cli import main as cli_main
from landtemp.data import loader


def test_render_page_from_input_file(tmp_path, dataset_file):
    out = tmp_path / "bundle"
    rc = cli_main(["render", "--input", str(dataset_file), "--output", str(out), "-q"])
    assert rc == 0
    assert (out / "index.html").exists()
    config = json.loads((out / "assets" / "config.json").read_text(encoding="utf-8"))
    assert "source" not in config
    assert str(dataset_file) not in (out / "index.html").read_text(encoding="utf-8")


def test_render_svg_target_with_size(tmp_path, dataset_file):
    out = tmp_path / "svg"
    rc = cli_main(
        [
            "render",
            "--target",
            "heatmap-svg",
            "--input",
            str(dataset_file),
            "--output",
            str(out),
            "--width",
            "600",
            "--height",
            "300",
            "-q",
        ]
    )
    assert rc == 0
    svg = (out / "heatmap.svg").read_text(encoding="utf-8")
    assert 'width="680"' in svg
    assert 'height="370"' in svg


def test_render_fetch_failure_returns_one_without_output(tmp_path, monkeypatch):
    from landtemp.connectors.backends.http import HttpRequestError

    def fake_fetch_json(url, **kwargs):
        raise HttpRequestError(f"GET {url} failed: unreachable")

    monkeypatch.setattr(loader, "fetch_json", fake_fetch_json)
    out = tmp_path / "bundle"
    rc = cli_main(
        ["render", "--url", "https://data.example/t.json", "--output", str(out), "-q"]
    )
    assert rc == 1
    assert not out.exists()


def test_render_uses_network_loader(tmp_path, monkeypatch, payload):
    seen = {}

    def fake_fetch_json(url, **kwargs):
        seen["url"] = url
        seen.update(kwargs)
        return payload

    monkeypatch.setattr(loader, "fetch_json", fake_fetch_json)
    rc = cli_main(
        [
            "render",
            "--url",
            "https://data.example/t.json",
            "--timeout",
            "3",
            "--retries",
            "1",
            "--output",
            str(tmp_path / "b"),
            "-q",
        ]
    )
    assert rc == 0
    assert seen == {
        "url": "https://data.example/t.json",
        "timeout": 3.0,
        "max_retries": 1,
    }
    config = json.loads((tmp_path / "b" / "assets" / "config.json").read_text())
    assert config["source"] == "https://data.example/t.json"


def test_render_unknown_target_is_usage_error(tmp_path, dataset_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(
            [
                "render",
                "--target",
                "globe",
                "--input",
                str(dataset_file),
                "--output",
                str(tmp_path),
            ]
        )
    assert excinfo.value.code == 2
    assert "Unknown renderer target 'globe'" in capsys.readouterr().err


def test_render_unknown_palette_is_usage_error(tmp_path, dataset_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(
            [
                "render",
                "--palette",
                "no-such-map",
                "--input",
                str(dataset_file),
                "--output",
                str(tmp_path),
            ]
        )
    assert excinfo.value.code == 2
    assert "Unknown colormap" in capsys.readouterr().err


@pytest.mark.parametrize(
    "flag, value", [("--width", "0"), ("--height", "-5"), ("--timeout", "0")]
)
def test_render_non_positive_numbers_are_usage_errors(
    tmp_path, dataset_file, capsys, flag, value
):
    out = tmp_path / "bundle"
    with pytest.raises(SystemExit) as excinfo:
        cli_main(
            ["render", "--input", str(dataset_file), "--output", str(out), flag, value]
        )
    assert excinfo.value.code == 2
    assert "must be positive" in capsys.readouterr().err
    assert not out.exists()


def test_render_nan_variance_fails_without_output(tmp_path):
    src = tmp_path / "nan.json"
    src.write_text(
        '{"baseTemperature": 8.0, "monthlyVariance": ['
        '{"year": 1900, "month": 1, "variance": NaN},'
        '{"year": 1901, "month": 1, "variance": 1.0}]}',
        encoding="utf-8",
    )
    out = tmp_path / "bundle"
    rc = cli_main(["render", "--input", str(src), "--output", str(out), "-q"])
    assert rc == 1
    assert not out.exists()


def test_url_and_input_are_exclusive(tmp_path, dataset_file):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(
            [
                "render",
                "--url",
                "https://data.example/t.json",
                "--input",
                str(dataset_file),
                "--output",
                str(tmp_path),
            ]
        )
    assert excinfo.value.code == 2


@pytest.mark.cli
def test_targets_subcommand_lists_renderers():
    proc = subprocess.run(
        [sys.executable, "-m", "landtemp.cli", "targets"],
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0, proc.stderr
    assert "heatmap-page" in proc.stdout
    assert "heatmap-svg" in proc.stdout


@pytest.mark.cli
@pytest.mark.parametrize("cmd", [["--help"], ["render", "--help"]])
def test_help_exits_zero(cmd):
    proc = subprocess.run(
        [sys.executable, "-m", "landtemp.cli", *cmd], capture_output=True
    )
    assert proc.returncode == 0, proc.stderr.decode(errors="ignore")
