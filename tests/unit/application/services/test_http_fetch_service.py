# tests/unit/application/services/test_http_fetch_service.py

"""Tests for the http get service with a mocked transport"""

# Standard library imports
from io import BytesIO
from itertools import count
from itertools import repeat
from unittest.mock import MagicMock
from unittest.mock import Mock
from unittest.mock import patch

# Third party imports
import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Local imports
from swiftline.application.services import HttpFetchService
from swiftline.core.domain.errors import InvalidHeader
from swiftline.core.domain.errors import InvalidUrl
from swiftline.core.domain.errors import IoError
from swiftline.core.domain.errors import NetworkError
from swiftline.core.domain.errors import ResponseParseError
from swiftline.core.domain.fetch_outcome import DisplayedResponse
from swiftline.core.domain.fetch_outcome import SavedDownload
from swiftline.infrastructure.config import ConfigLoader
from swiftline.infrastructure.logging import ProgressDisplay


class FakeResponse:
    """Stand-in for requests.Response that never touches the network"""

    def __init__(
        self,
        status_code=200,
        reason="OK",
        headers=None,
        chunks=(),
        stream_error=None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.headers = CaseInsensitiveDict(headers or {})
        self._chunks = chunks
        self._stream_error = stream_error
        self.closed = False
        self.chunk_sizes = []

    def iter_content(self, chunk_size=1):
        self.chunk_sizes.append(chunk_size)
        for chunk in self._chunks:
            yield chunk
        if self._stream_error is not None:
            raise self._stream_error

    def close(self):
        self.closed = True


def real_response(body, content_type, status_code=200, reason="OK"):
    """requests.Response over an in-memory body, with requests' own decoding rules"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.headers = CaseInsensitiveDict({"Content-Type": content_type})
    response.raw = BytesIO(body)
    return response


def make_service(response=None, console=None, error=None):
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    service = HttpFetchService(
        config=ConfigLoader({}),
        session=session,
        progress=ProgressDisplay(enabled=False),
        console=console,
    )
    return service, session


class TestRequestValidation:
    """Bad input fails before any network activity"""

    @pytest.mark.parametrize("header", ["NoColonHere", ": value", "Bad Key: v", "X-A: a\nb"])
    def test_malformed_header_sends_nothing(self, header):
        service, session = make_service(FakeResponse())
        with pytest.raises(InvalidHeader) as exc_info:
            service.fetch("https://example.com", headers=[header])
        assert exc_info.value.header == header
        session.get.assert_not_called()

    @pytest.mark.parametrize("url", ["not a url", "example.com/path", "ftp://example.com", "http://"])
    def test_malformed_url_sends_nothing(self, url):
        service, session = make_service(FakeResponse())
        with pytest.raises(InvalidUrl):
            service.fetch(url)
        session.get.assert_not_called()


class TestRequest:
    """How the request is sent"""

    def test_headers_timeout_and_streaming(self, plain_console):
        service, session = make_service(FakeResponse(chunks=[b"hi"]), console=plain_console)

        service.fetch(
            "https://example.com/data",
            headers=["Accept: application/json", "X-Tag: a", "x-tag: b"],
            timeout=5,
        )

        session.get.assert_called_once_with(
            "https://example.com/data",
            headers={"Accept": "application/json", "X-Tag": "a, b"},
            timeout=5,
            stream=True,
        )

    def test_default_timeout_is_thirty_seconds(self, plain_console):
        service, session = make_service(FakeResponse(), console=plain_console)
        service.fetch("https://example.com")
        assert session.get.call_args.kwargs["timeout"] == 30

    def test_transport_failure_is_network_error(self):
        service, _ = make_service(error=requests.ConnectionError("connection refused"))
        with pytest.raises(NetworkError) as exc_info:
            service.fetch("https://example.com")
        assert "connection refused" in str(exc_info.value)

    def test_timeout_is_network_error(self):
        service, _ = make_service(error=requests.Timeout("timed out"))
        with pytest.raises(NetworkError):
            service.fetch("https://example.com", timeout=1)

    def test_overall_deadline(self, plain_console):
        service, _ = make_service(FakeResponse(chunks=[b"x"]), console=plain_console)
        with patch(
            "swiftline.application.services._http_fetch_service.monotonic",
            side_effect=[0.0, 100.0],
        ):
            with pytest.raises(NetworkError) as exc_info:
                service.fetch("https://example.com", timeout=10)
        assert "timed out" in str(exc_info.value)

    def test_response_is_closed(self, plain_console):
        response = FakeResponse(chunks=[b"ok"])
        service, _ = make_service(response, console=plain_console)
        service.fetch("https://example.com")
        assert response.closed

    def test_default_session_sets_user_agent(self):
        service = HttpFetchService(config=ConfigLoader({}))
        assert service.session.headers["User-Agent"].startswith("swiftline/")


class TestDisplay:
    """Inline rendering of the response"""

    def test_text_body_with_status_line(self, plain_console):
        response = FakeResponse(headers={"Content-Type": "text/plain"}, chunks=[b"hello ", b"[world]"])
        service, _ = make_service(response, console=plain_console)

        outcome = service.fetch("https://example.com")

        assert isinstance(outcome, DisplayedResponse)
        assert outcome.text == "hello [world]"
        assert not outcome.is_json
        assert plain_console.file.getvalue() == "Status: 200 OK\nhello [world]\n"

    def test_pretty_json(self, plain_console):
        response = FakeResponse(
            headers={"Content-Type": "application/json; charset=utf-8"},
            chunks=[b'{"b": 1, "a": [true, null]}'],
        )
        service, _ = make_service(response, console=plain_console)

        outcome = service.fetch("https://example.com", pretty=True)

        assert outcome.is_json
        assert outcome.json_body == {"b": 1, "a": [True, None]}
        assert plain_console.file.getvalue() == (
            'Status: 200 OK\n{\n  "b": 1,\n  "a": [\n    true,\n    null\n  ]\n}\n'
        )

    def test_json_printed_raw_without_pretty(self, plain_console):
        response = FakeResponse(headers={"Content-Type": "application/json"}, chunks=[b'{"a":1}'])
        service, _ = make_service(response, console=plain_console)
        outcome = service.fetch("https://example.com")
        assert not outcome.is_json
        assert plain_console.file.getvalue().endswith('{"a":1}\n')

    def test_pretty_ignored_for_non_json(self, plain_console):
        response = FakeResponse(headers={"Content-Type": "text/html"}, chunks=[b"<p>hi</p>"])
        service, _ = make_service(response, console=plain_console)
        outcome = service.fetch("https://example.com", pretty=True)
        assert outcome.text == "<p>hi</p>"

    def test_bad_json_is_response_parse_error_with_status(self, plain_console):
        response = FakeResponse(
            status_code=502,
            reason="Bad Gateway",
            headers={"Content-Type": "application/json"},
            chunks=[b"<html>oops</html>"],
        )
        service, _ = make_service(response, console=plain_console)
        with pytest.raises(ResponseParseError) as exc_info:
            service.fetch("https://example.com", pretty=True)
        assert exc_info.value.status_code == 502
        assert "status 502" in str(exc_info.value)

    def test_error_status_is_still_displayed(self, plain_console):
        response = FakeResponse(status_code=404, reason="Not Found", chunks=[b"missing"])
        service, _ = make_service(response, console=plain_console)
        outcome = service.fetch("https://example.com")
        assert outcome.status_code == 404
        assert plain_console.file.getvalue().startswith("Status: 404 Not Found\n")

    def test_body_read_failure_is_network_error(self, plain_console):
        response = FakeResponse(chunks=[b"par"], stream_error=requests.ConnectionError("reset"))
        service, _ = make_service(response, console=plain_console)
        with pytest.raises(NetworkError) as exc_info:
            service.fetch("https://example.com")
        assert "reset" in str(exc_info.value)
        assert plain_console.file.getvalue() == ""

    def test_slow_endless_body_is_cut_off_at_timeout(self, plain_console):
        response = FakeResponse(headers={"Content-Type": "text/plain"}, chunks=repeat(b"x"))
        service, _ = make_service(response, console=plain_console)

        # Each clock reading advances a quarter second
        with patch(
            "swiftline.application.services._http_fetch_service.monotonic",
            side_effect=count(0.0, 0.25),
        ):
            with pytest.raises(NetworkError) as exc_info:
                service.fetch("https://example.com", timeout=1)

        assert "Request timed out after 1s" in str(exc_info.value)
        assert response.closed
        assert plain_console.file.getvalue() == ""

    def test_slow_json_body_is_cut_off_at_timeout(self, plain_console):
        response = FakeResponse(headers={"Content-Type": "application/json"}, chunks=repeat(b" "))
        service, _ = make_service(response, console=plain_console)

        with patch(
            "swiftline.application.services._http_fetch_service.monotonic",
            side_effect=count(0.0, 0.25),
        ):
            with pytest.raises(NetworkError):
                service.fetch("https://example.com", timeout=1, pretty=True)


class TestBodyDecoding:
    """Text bodies are decoded as UTF-8 unless a charset is declared"""

    def test_text_plain_without_charset_is_utf8(self, plain_console):
        body = "héllo wörld".encode("utf-8")
        response = real_response(body, "text/plain")
        service, _ = make_service(response, console=plain_console)

        outcome = service.fetch("https://example.com")

        assert outcome.text == "héllo wörld"
        assert plain_console.file.getvalue() == "Status: 200 OK\nhéllo wörld\n"

    def test_declared_charset_is_used(self, plain_console):
        response = real_response("café".encode("latin-1"), "text/html; charset=ISO-8859-1")
        service, _ = make_service(response, console=plain_console)
        assert service.fetch("https://example.com").text == "café"

    def test_missing_content_type_is_utf8(self, plain_console):
        response = FakeResponse(chunks=["naïve".encode("utf-8")])
        service, _ = make_service(response, console=plain_console)
        assert service.fetch("https://example.com").text == "naïve"

    def test_invalid_utf8_is_replaced(self, plain_console):
        response = real_response(b"ok \xff\xfe end", "text/plain")
        service, _ = make_service(response, console=plain_console)
        assert service.fetch("https://example.com").text == "ok �� end"

    def test_unknown_charset_falls_back_to_utf8(self, plain_console):
        response = real_response("ü".encode("utf-8"), "text/plain; charset=no-such-charset")
        service, _ = make_service(response, console=plain_console)
        assert service.fetch("https://example.com").text == "ü"

    def test_pretty_json_with_byte_order_mark(self, plain_console):
        response = real_response(b'\xef\xbb\xbf{"a": 1}', "application/json")
        service, _ = make_service(response, console=plain_console)
        assert service.fetch("https://example.com", pretty=True).json_body == {"a": 1}

    def test_pretty_json_with_non_ascii(self, plain_console):
        response = real_response('{"name": "Zoë"}'.encode("utf-8"), "application/json")
        service, _ = make_service(response, console=plain_console)

        outcome = service.fetch("https://example.com", pretty=True)

        assert outcome.json_body == {"name": "Zoë"}
        assert plain_console.file.getvalue() == 'Status: 200 OK\n{\n  "name": "Zoë"\n}\n'


class TestSave:
    """Streaming the body to a file"""

    def test_chunks_written_in_order(self, plain_console, tmp_path):
        chunks = [b"first-", b"second-", b"", b"third"]
        body = b"".join(chunks)
        response = FakeResponse(headers={"Content-Length": str(len(body))}, chunks=chunks)
        service, _ = make_service(response, console=plain_console)
        destination = tmp_path / "out.bin"

        outcome = service.fetch("https://example.com/file", save=destination)

        assert isinstance(outcome, SavedDownload)
        assert destination.read_bytes() == body
        assert outcome.bytes_written == len(body) == outcome.content_length
        assert outcome.path == str(destination)
        assert plain_console.file.getvalue() == f"Status: 200 OK\nSaved to: {destination}\n"

    def test_uses_configured_chunk_size(self, plain_console, tmp_path):
        response = FakeResponse(chunks=[b"x"])
        service, _ = make_service(response, console=plain_console)
        service.fetch("https://example.com", save=tmp_path / "x")
        assert response.chunk_sizes == [8192]

    def test_unknown_length_uses_indeterminate_progress(self, plain_console, tmp_path):
        response = FakeResponse(chunks=[b"abc", b"def"])
        progress = Mock(wraps=ProgressDisplay(enabled=False))
        service = HttpFetchService(
            config=ConfigLoader({}),
            session=Mock(get=Mock(return_value=response)),
            progress=progress,
            console=plain_console,
        )

        outcome = service.fetch("https://example.com", save=tmp_path / "out")

        progress.download.assert_called_once_with(None)
        assert outcome.content_length is None
        assert outcome.bytes_written == 6

    def test_known_length_reports_each_chunk(self, plain_console, tmp_path):
        response = FakeResponse(headers={"Content-Length": "6"}, chunks=[b"abc", b"def"])
        advance = Mock()
        progress = MagicMock()
        progress.download.return_value.__enter__ = Mock(return_value=advance)
        progress.download.return_value.__exit__ = Mock(return_value=False)
        service = HttpFetchService(
            config=ConfigLoader({}),
            session=Mock(get=Mock(return_value=response)),
            progress=progress,
            console=plain_console,
        )

        service.fetch("https://example.com", save=tmp_path / "out")

        progress.download.assert_called_once_with(6)
        assert [c.args for c in advance.call_args_list] == [(3,), (3,)]

    def test_stream_failure_removes_partial_file(self, plain_console, tmp_path):
        response = FakeResponse(
            headers={"Content-Length": "100"},
            chunks=[b"partial"],
            stream_error=requests.exceptions.ChunkedEncodingError("connection broken"),
        )
        service, _ = make_service(response, console=plain_console)
        destination = tmp_path / "out.bin"

        with pytest.raises(NetworkError) as exc_info:
            service.fetch("https://example.com", save=destination)

        assert "Error reading response stream" in str(exc_info.value)
        assert not destination.exists()
        assert plain_console.file.getvalue() == ""

    def test_interrupt_removes_partial_file(self, plain_console, tmp_path):
        response = FakeResponse(chunks=[b"partial"], stream_error=KeyboardInterrupt())
        service, _ = make_service(response, console=plain_console)
        destination = tmp_path / "out.bin"

        with pytest.raises(KeyboardInterrupt):
            service.fetch("https://example.com", save=destination)

        assert not destination.exists()
        assert response.closed

    def test_uncreatable_file_is_io_error(self, plain_console, tmp_path):
        response = FakeResponse(chunks=[b"data"])
        service, _ = make_service(response, console=plain_console)
        destination = tmp_path / "no-such-dir" / "out.bin"

        with pytest.raises(IoError) as exc_info:
            service.fetch("https://example.com", save=destination)

        assert exc_info.value.path == str(destination)
        assert "Cannot create file" in str(exc_info.value)
