from pathlib import Path

import httpx
import pytest
from click.testing import CliRunner

from httpcli import __version__
from httpcli.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_get_adds_scheme_and_prints_response(runner, mock_config, recorder) -> None:
    recorder.text = "hello world"

    result = runner.invoke(cli, ["get", "example.com"])

    assert result.exit_code == 0, result.output
    assert recorder.last.url.scheme == "http"
    assert recorder.last.url.host == "example.com"
    assert recorder.last.url.raw_path == b"/"
    assert recorder.last.method == "GET"
    assert "200 OK" in result.output
    assert "hello world" in result.output


def test_get_not_found_still_exits_zero(runner, mock_config, recorder) -> None:
    recorder.status = 404
    recorder.text = "no such page"

    result = runner.invoke(cli, ["get", "example.com/missing"])

    assert result.exit_code == 0, result.output
    assert "404 Not Found" in result.output
    assert "no such page" in result.output


def test_server_error_still_exits_zero(runner, mock_config, recorder) -> None:
    recorder.status = 503

    result = runner.invoke(cli, ["delete", "example.com"])

    assert result.exit_code == 0, result.output
    assert "503 Service Unavailable" in result.output


def test_post_json_data_with_header(runner, mock_config, recorder) -> None:
    result = runner.invoke(cli, [
        "post", "http://example.com", "-d", '{"key":"value"}', "-H", "Content-Type=application/json",
    ])

    assert result.exit_code == 0, result.output
    assert len(recorder.requests) == 1
    request = recorder.last
    assert request.method == "POST"
    assert request.content == b'{"key":"value"}'
    assert request.headers.get_list("Content-Type") == ["application/json"]


def test_put_file_body(runner, mock_config, recorder, tmp_path: Path) -> None:
    body = tmp_path / "update.txt"
    body.write_bytes(b"new contents\n")

    result = runner.invoke(cli, ["put", "example.com", "-f", str(body)])

    assert result.exit_code == 0, result.output
    assert recorder.last.method == "PUT"
    assert recorder.last.content == b"new contents\n"


def test_put_missing_file_sends_nothing(runner, mock_config, recorder, tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    result = runner.invoke(cli, ["put", "example.com", "-f", str(missing)])

    assert result.exit_code == 1
    assert "Cannot read file" in result.output
    assert "missing.txt" in result.output
    assert recorder.requests == []


def test_delete_sends_no_body(runner, mock_config, recorder) -> None:
    result = runner.invoke(cli, ["delete", "http://example.com"])

    assert result.exit_code == 0, result.output
    request = recorder.last
    assert request.method == "DELETE"
    assert request.content == b""
    assert "content-type" not in request.headers


def test_repeated_headers_are_all_sent(runner, mock_config, recorder) -> None:
    result = runner.invoke(cli, ["get", "example.com", "-H", "X-Tag=one", "--headers", "X-Tag=two"])

    assert result.exit_code == 0, result.output
    assert recorder.last.headers.get_list("X-Tag") == ["one", "two"]


def test_malformed_header_is_rejected(runner, mock_config, recorder) -> None:
    result = runner.invoke(cli, ["get", "example.com", "-H", "Content-Type"])

    assert result.exit_code == 2
    assert "invalid header 'Content-Type'" in result.output
    assert recorder.requests == []


def test_data_and_file_together_are_rejected(runner, mock_config, recorder) -> None:
    for _ in range(2):
        result = runner.invoke(cli, ["post", "example.com", "-d", "x", "-f", "body.txt"])
        assert result.exit_code == 2
        assert "not both" in result.output
    assert recorder.requests == []


def test_form_upload(runner, mock_config, recorder, tmp_path: Path) -> None:
    upload = tmp_path / "report.csv"
    upload.write_text("a,b\n1,2\n")

    result = runner.invoke(cli, ["post", "example.com", "-f", str(upload), "--form"])

    assert result.exit_code == 0, result.output
    assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b"a,b\n1,2\n" in recorder.last.content


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["patch", "example.com"],
        ["get"],
        ["get", "example.com", "-d", "x"],
        ["delete", "example.com", "-f", "body.txt"],
    ],
)
def test_usage_errors_exit_with_status_two(runner, mock_config, recorder, args) -> None:
    result = runner.invoke(cli, args)

    assert result.exit_code == 2
    assert recorder.requests == []


def test_transport_error_exits_one(runner, mock_config, recorder) -> None:
    recorder.error = lambda request: httpx.ConnectError("Connection refused", request=request)

    result = runner.invoke(cli, ["get", "localhost:9"])

    assert result.exit_code == 1
    assert "Connection failed: Connection refused" in result.output
    assert len(recorder.requests) == 1


def test_timeout_option_is_used(runner, mock_config, recorder) -> None:
    recorder.error = lambda request: httpx.ConnectTimeout("timed out", request=request)

    result = runner.invoke(cli, ["--timeout", "1.5", "get", "example.com"])

    assert result.exit_code == 1
    assert "timed out after 1.5s" in result.output


def test_verbose_shows_request_and_response_headers(runner, mock_config, recorder) -> None:
    recorder.response_headers = {"X-Server": "mock"}

    result = runner.invoke(cli, ["get", "example.com", "-v", "-H", "Accept=text/plain"])

    assert result.exit_code == 0, result.output
    assert "GET http://example.com" in result.output
    assert "accept: text/plain" in result.output
    assert "user-agent: httpcli/" in result.output
    assert "Response Headers:" in result.output
    assert "x-server: mock" in result.output


def test_log_file_receives_debug_records(runner, mock_config, recorder, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "httpcli.log"

    result = runner.invoke(cli, ["--log-file", str(log_file), "get", "example.com"])

    assert result.exit_code == 0, result.output
    assert "Sending GET http://example.com" in log_file.read_text()


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_body_is_printed_verbatim(runner, mock_config, recorder) -> None:
    recorder.text = "col1\tcol2\r\nrow 2\t[bold]x[/bold]"

    result = runner.invoke(cli, ["get", "example.com"])

    assert result.exit_code == 0, result.output
    # Result.output folds \r\n into \n, so check the raw bytes
    assert b"col1\tcol2\r\nrow 2\t[bold]x[/bold]\n" in result.stdout_bytes


def test_directory_as_file_is_a_read_error(runner, mock_config, recorder, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["post", "example.com", "-f", str(tmp_path)])

    assert result.exit_code == 1
    assert "Cannot read file" in result.output
    assert recorder.requests == []


def test_verbose_lists_default_content_type(runner, mock_config, recorder) -> None:
    recorder.text = "created"

    result = runner.invoke(cli, ["post", "example.com", "-v", "-d", '{"a": 1}'])

    assert result.exit_code == 0, result.output
    assert "POST http://example.com" in result.output
    assert "content-type: application/json" in result.output
    assert "Size: 7 bytes" in result.output
