import io
import json
from pathlib import Path

import pytest

from greenspace.cli import parse_args, run_command
from greenspace.common.constants import EXIT_FALLBACK, EXIT_HARD_FAIL, EXIT_SUCCESS

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "parks_sample.csv"


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    exit_code = run_command(parse_args(argv), stdout=out)
    return exit_code, out.getvalue()


@pytest.mark.integration
def test_cli_stats_from_fixture():
    exit_code, output = _run(["stats", "--config-dir", "config", "--source", str(FIXTURE)])

    assert exit_code == EXIT_SUCCESS
    assert json.loads(output) == {
        "average_rating": 4.5,
        "has_data": True,
        "total_area_hectares": 209,
        "total_parks": 6,
    }


@pytest.mark.integration
def test_cli_search_reveals_requested_pages():
    exit_code, output = _run(
        ["search", "--config-dir", "config", "--source", str(FIXTURE), "--facet", "Recreation Ground", "--search", "park"]
    )
    payload = json.loads(output)

    assert exit_code == EXIT_SUCCESS
    assert payload["total"] == 2
    assert payload["visible_count"] == 2
    assert [park["site_name"] for park in payload["parks"]] == ["Castle Street Park", "Eastville Park"]


@pytest.mark.integration
def test_cli_export_writes_file(tmp_path: Path):
    out_path = tmp_path / "export" / "bristol_parks_data.csv"
    exit_code, _ = _run(
        ["export", "--config-dir", "config", "--source", str(FIXTURE), "--search", "queen", "--output", str(out_path)]
    )

    assert exit_code == EXIT_SUCCESS
    assert out_path.read_text(encoding="utf-8") == (
        "Park Name,Type,Area,Location,Rating\n"
        "Queen Square,Urban Square,1.2 hectares,City Centre,4.7\n"
    )


@pytest.mark.integration
def test_cli_reports_fallback_exit_code(tmp_path: Path):
    exit_code, output = _run(
        ["facets", "--config-dir", "config", "--source", str(tmp_path / "missing.csv"), "--log-dir", str(tmp_path / "logs")]
    )

    assert exit_code == EXIT_FALLBACK
    assert json.loads(output)[0] == {"count": 7, "label": "All Parks", "value": "all"}
    assert list((tmp_path / "logs").glob("*.log.jsonl"))


@pytest.mark.integration
def test_cli_bad_config_is_hard_failure(tmp_path: Path):
    exit_code, _ = _run(["stats", "--config-dir", str(tmp_path)])
    assert exit_code == EXIT_HARD_FAIL
