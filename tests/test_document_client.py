from __future__ import annotations

import httpx
import pytest

from hotel_feed.services import DocumentClient, DocumentFetchError


def test_reads_plain_paths_and_file_uris(tmp_path) -> None:
    path = tmp_path / "Hotels.xml"
    path.write_bytes(b"<Hotels/>")

    with DocumentClient() as client:
        assert client.fetch(str(path)) == b"<Hotels/>"
        assert client.fetch(path.as_uri()) == b"<Hotels/>"


def test_missing_file_raises_fetch_error(tmp_path) -> None:
    location = str(tmp_path / "absent.xml")

    with DocumentClient() as client, pytest.raises(DocumentFetchError) as excinfo:
        client.fetch(location)

    assert excinfo.value.location == location
    assert str(excinfo.value).startswith(f"Unable to read '{location}'")


def test_http_fetch_sends_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"<Hotels/>")

    transport = httpx.MockTransport(handler)
    with DocumentClient(headers={"User-Agent": "tests/1.0"}, transport=transport) as client:
        assert client.fetch("https://example.test/Hotels.xml") == b"<Hotels/>"

    assert seen[0].headers["User-Agent"] == "tests/1.0"
    assert "xml" in seen[0].headers["Accept"]


def test_http_status_error_is_wrapped() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    with DocumentClient(transport=transport) as client, pytest.raises(DocumentFetchError) as excinfo:
        client.fetch("https://example.test/Hotels.xml")

    assert excinfo.value.reason == "HTTP 500 Internal Server Error"
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_transport_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with DocumentClient(transport=httpx.MockTransport(handler)) as client, pytest.raises(DocumentFetchError) as excinfo:
        client.fetch("http://example.test/Hotels.xml")

    assert excinfo.value.reason == "connection refused"


@pytest.mark.parametrize(
    "location",
    ["http://[::1/Hotels.xml", "Hotels\x00.xml", "file:///tmp/Hotels\x00.xml"],
)
def test_malformed_locations_raise_fetch_error(location) -> None:
    with DocumentClient() as client, pytest.raises(DocumentFetchError) as excinfo:
        client.fetch(location)

    assert excinfo.value.location == location


def test_invalid_http_url_is_wrapped() -> None:
    location = "http://example.test/Hotels\x01.xml"
    transport = httpx.MockTransport(lambda request: httpx.Response(200))

    with DocumentClient(transport=transport) as client, pytest.raises(DocumentFetchError) as excinfo:
        client.fetch(location)

    assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)
