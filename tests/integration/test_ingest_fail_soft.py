from __future__ import annotations

from pathlib import Path

import pytest

from greenspace.common.config_loader import load_all_configs
from greenspace.common.errors import RetrievalError
from greenspace.common.http import HttpClient, RetryConfig
from greenspace.ingest import runner

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "parks_sample.csv"


class FakeClient:
    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.urls: list[str] = []

    def get_text(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text or ""


@pytest.mark.integration
def test_ingest_serves_fallback_when_retrieval_fails(monkeypatch):
    def fail_fetch(*_args, **_kwargs):
        raise RetrievalError("portal down")

    monkeypatch.setattr(runner, "fetch_raw_text", fail_fetch)

    result = runner.run_ingest("https://example.test/parks.csv")

    assert result.used_fallback is True
    assert result.source == "builtin:fallback"
    assert [park.site_name for park in result.parks][:3] == [
        "Castle Street Park",
        "Brandon Hill Nature Park",
        "Queen Square",
    ]
    assert all(park.is_derived for park in result.parks)


@pytest.mark.integration
def test_ingest_serves_fallback_for_missing_file(tmp_path: Path):
    result = runner.run_ingest(tmp_path / "missing.csv")
    assert result.used_fallback is True
    assert len(result.parks) == 7


@pytest.mark.integration
def test_ingest_serves_fallback_for_header_only_payload():
    result = runner.run_ingest("https://example.test/parks.csv", client=FakeClient("SITE_NAME,LOCATION\n"))
    assert result.used_fallback is True


@pytest.mark.integration
def test_ingest_reads_remote_payload_through_client():
    client = FakeClient(FIXTURE.read_text(encoding="utf-8"))

    result = runner.run_ingest("https://example.test/parks.csv", client=client)

    assert client.urls == ["https://example.test/parks.csv"]
    assert result.used_fallback is False
    assert len(result.parks) == 6


@pytest.mark.integration
def test_ingest_http_errors_are_recovered(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))

    class _Response:
        status_code = 500
        headers: dict = {}
        text = ""

    monkeypatch.setattr(client.session, "request", lambda **_kwargs: _Response())

    result = runner.run_ingest("https://example.test/parks.csv", client=client)

    assert result.used_fallback is True


@pytest.mark.integration
def test_ingest_uses_configured_source_and_limits(tmp_path: Path):
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "dataset.yml").write_text(
        f"""dataset:
  source: "{FIXTURE.as_posix()}"
  last_updated: "May 2026"
limits:
  max_records: 3
""",
        encoding="utf-8",
    )
    bundle = load_all_configs(Path("config"), overlay_config_dir=overlay)

    result = runner.run_ingest(bundle=bundle)

    assert [park.site_name for park in result.parks] == [
        "Castle Street Park",
        "Brandon Hill Nature Park",
        "Queen Square",
    ]
    assert result.truncated == 3
    assert {park.last_updated for park in result.parks} == {"May 2026"}


@pytest.mark.integration
def test_ingest_without_source_serves_fallback():
    result = runner.run_ingest()

    assert result.used_fallback is True
    assert result.source == "builtin:fallback"
    assert len(result.parks) == 7
