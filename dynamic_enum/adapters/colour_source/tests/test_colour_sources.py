"""Unit tests for the colour source adapters and the source factory."""

import json

import httpx
import pytest
from tenacity import wait_none

from dynamic_enum.adapters.colour_source import (
    HttpColourSource,
    JsonFileColourSource,
    StaticColourSource,
    create_colour_source,
)
from dynamic_enum.adapters.colour_source.http import should_retry_on_timeout_or_server_error
from dynamic_enum.core.config import ColourSourceType, Settings
from dynamic_enum.core.exceptions import DataSourceError

URL = "http://colours.test/api/colours"

RECORDS_JSON = [
    {"name": "BLACK", "r": 0, "g": 0, "b": 0, "sequence": 4},
    {"name": "WHITE", "r": 255, "g": 255, "b": 255, "sequence": 5},
]


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    """Retry immediately so failing HTTP tests don't sleep."""
    monkeypatch.setattr(HttpColourSource._get.retry, "wait", wait_none())


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# StaticColourSource
# ---------------------------------------------------------------------------


def test_static_source_supplies_black_and_white():
    records = StaticColourSource().fetch_records()

    assert [(r.name, r.sequence) for r in records] == [("BLACK", 4), ("WHITE", 5)]
    assert (records[1].r, records[1].g, records[1].b) == (255, 255, 255)


def test_static_source_returns_new_list():
    source = StaticColourSource()
    source.fetch_records().clear()

    assert len(source.fetch_records()) == 2


# ---------------------------------------------------------------------------
# JsonFileColourSource
# ---------------------------------------------------------------------------


class TestJsonFileColourSource:
    def test_reads_records_in_file_order(self, tmp_path):
        path = tmp_path / "colours.json"
        path.write_text(json.dumps(list(reversed(RECORDS_JSON))))

        records = JsonFileColourSource(path).fetch_records()

        assert [r.name for r in records] == ["WHITE", "BLACK"]

    def test_missing_file(self, tmp_path):
        source = JsonFileColourSource(tmp_path / "missing.json")

        with pytest.raises(DataSourceError, match="cannot read file") as exc_info:
            source.fetch_records()

        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.parametrize(
        "content",
        [
            pytest.param("not json", id="malformed"),
            pytest.param('{"name": "BLACK"}', id="object instead of array"),
            pytest.param('[{"name": "BLACK", "r": 0, "g": 0, "b": 0}]', id="missing sequence"),
            pytest.param('[{"name": "HOT", "r": 300, "g": 0, "b": 0, "sequence": 6}]', id="r>255"),
            pytest.param('[{"name": "", "r": 0, "g": 0, "b": 0, "sequence": 6}]', id="empty name"),
        ],
    )
    def test_invalid_content(self, tmp_path, content):
        path = tmp_path / "colours.json"
        path.write_text(content)

        with pytest.raises(DataSourceError, match="invalid colour records"):
            JsonFileColourSource(path).fetch_records()


# ---------------------------------------------------------------------------
# HttpColourSource
# ---------------------------------------------------------------------------


class TestHttpColourSource:
    def test_fetches_records(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=RECORDS_JSON)

        records = HttpColourSource(URL, client=_client(handler)).fetch_records()

        assert [r.name for r in records] == ["BLACK", "WHITE"]
        assert len(requests) == 1
        assert str(requests[0].url) == URL

    def test_retries_server_errors(self):
        responses = iter([httpx.Response(503), httpx.Response(200, json=RECORDS_JSON)])
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return next(responses)

        records = HttpColourSource(URL, client=_client(handler)).fetch_records()

        assert len(records) == 2
        assert len(calls) == 2

    def test_gives_up_after_max_attempts(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(DataSourceError, match="request failed"):
            HttpColourSource(URL, client=_client(handler)).fetch_records()

        assert len(calls) == HttpColourSource.MAX_ATTEMPTS

    def test_client_errors_are_not_retried(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(404)

        with pytest.raises(DataSourceError) as exc_info:
            HttpColourSource(URL, client=_client(handler)).fetch_records()

        assert len(calls) == 1
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_invalid_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"colours": RECORDS_JSON})

        with pytest.raises(DataSourceError, match="invalid colour records"):
            HttpColourSource(URL, client=_client(handler)).fetch_records()


@pytest.mark.parametrize(
    "exception, expected",
    [
        pytest.param(httpx.ReadTimeout("slow"), True, id="read timeout"),
        pytest.param(httpx.ConnectError("refused"), True, id="connect error"),
        pytest.param(ValueError("nope"), False, id="unrelated error"),
    ],
)
def test_should_retry(exception, expected):
    assert should_retry_on_timeout_or_server_error(exception) is expected


@pytest.mark.parametrize("status, expected", [(500, True), (502, True), (404, False), (429, False)])
def test_should_retry_status(status, expected):
    request = httpx.Request("GET", URL)
    error = httpx.HTTPStatusError(
        "status", request=request, response=httpx.Response(status, request=request)
    )

    assert should_retry_on_timeout_or_server_error(error) is expected


# ---------------------------------------------------------------------------
# FakeColourSource
# ---------------------------------------------------------------------------


class TestFakeColourSource:
    def test_counts_fetches(self, fake_colour_source, make_colour_record):
        fake_colour_source.records.append(make_colour_record("BLACK", 3))

        fake_colour_source.fetch_records()
        records = fake_colour_source.fetch_records()

        assert fake_colour_source.fetch_count == 2
        assert [r.name for r in records] == ["BLACK"]

    def test_fail_with(self, fake_colour_source):
        fake_colour_source.fail_with(DataSourceError("fake", "down"))

        with pytest.raises(DataSourceError):
            fake_colour_source.fetch_records()

        fake_colour_source.fail_with(None)
        assert fake_colour_source.fetch_records() == []


# ---------------------------------------------------------------------------
# create_colour_source()
# ---------------------------------------------------------------------------


class TestFactory:
    def test_static_by_default(self):
        source = create_colour_source(Settings(_env_file=None, COLOUR_SOURCE="static"))

        assert isinstance(source, StaticColourSource)

    def test_file(self, tmp_path):
        path = tmp_path / "colours.json"
        settings = Settings(_env_file=None, COLOUR_SOURCE="file", COLOUR_SOURCE_PATH=path)

        source = create_colour_source(settings)

        assert isinstance(source, JsonFileColourSource)
        assert source.path == path

    def test_http(self):
        settings = Settings(
            _env_file=None, COLOUR_SOURCE="http", COLOUR_SOURCE_URL=URL, COLOUR_SOURCE_TIMEOUT=2.5
        )

        source = create_colour_source(settings)

        assert isinstance(source, HttpColourSource)
        assert source.url == URL
        assert source.timeout == 2.5

    @pytest.mark.parametrize(
        "source_type, missing",
        [
            pytest.param(ColourSourceType.FILE, "COLOUR_SOURCE_PATH", id="file without path"),
            pytest.param(ColourSourceType.HTTP, "COLOUR_SOURCE_URL", id="http without url"),
        ],
    )
    def test_unvalidated_settings_missing_location(self, source_type, missing):
        settings = Settings.model_construct(COLOUR_SOURCE=source_type)

        with pytest.raises(ValueError, match=missing):
            create_colour_source(settings)
