from __future__ import annotations

import pytest

from hotel_feed import cli
from hotel_feed.services import DocumentFetchError

from sample_documents import INVALID_HOTELS, VALID_HOTELS


@pytest.fixture
def configured_env(monkeypatch, tmp_path, write_file, xsd_location):
    monkeypatch.setenv("HOTELS_XML_URL", write_file("Hotels.xml", VALID_HOTELS))
    monkeypatch.setenv("HOTELS_XML_ERROR_URL", write_file("HotelsErrors.xml", INVALID_HOTELS))
    monkeypatch.setenv("HOTELS_XSD_URL", xsd_location)
    monkeypatch.chdir(tmp_path)


def test_main_prints_validation_results_then_json(configured_env, capsys) -> None:
    cli.main()

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "No errors are found"
    assert out[1].startswith("Error: (line 4")
    assert out[2].startswith("Error: (line 7")
    assert out[3].startswith('{"Hotels":{"Hotel":[{"Name":"Grand Plaza"')
    assert len(out) == 4


def test_conversion_failure_is_fatal(configured_env, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOTELS_XML_URL", str(tmp_path / "gone.xml"))

    with pytest.raises(DocumentFetchError):
        cli.main()
