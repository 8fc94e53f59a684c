import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _env() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    return env


def test_cli_scan_json(tmp_path: Path) -> None:
    out = tmp_path / "report.json"
    cmd = [
        sys.executable,
        "-m",
        "patterndetect",
        "scan",
        str(ROOT / "fixtures" / "tiny_repo"),
        "--format",
        "json",
        "--out",
        str(out),
        "--no-progress",
    ]
    subprocess.check_call(cmd, env=_env(), cwd=tmp_path)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert len(payload["matches"]) == 1
    assert payload["stats"]["file_count"] == 3


def test_cli_scan_text_exact_mode(tmp_path: Path) -> None:
    cmd = [
        sys.executable,
        "-m",
        "patterndetect",
        "scan",
        str(ROOT / "fixtures" / "tiny_repo"),
        "--exact",
        "--no-approx",
        "--min-similarity",
        "0.5",
        "--max-comparisons",
        "0",
        "--no-progress",
    ]
    output = subprocess.check_output(cmd, env=_env(), cwd=tmp_path, text=True)
    assert "0 comparisons" in output
    assert "warning: Comparison budget exhausted" in output


def test_cli_rejects_invalid_config(tmp_path: Path) -> None:
    cmd = [
        sys.executable,
        "-m",
        "patterndetect",
        "scan",
        str(ROOT / "fixtures" / "tiny_repo"),
        "--min-lines",
        "0",
        "--no-progress",
    ]
    result = subprocess.run(cmd, env=_env(), cwd=tmp_path, capture_output=True, text=True)
    assert result.returncode != 0
    assert "ConfigError" in result.stderr
