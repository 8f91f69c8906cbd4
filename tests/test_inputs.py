import json
import urllib.error
from pathlib import Path
from unittest import mock

import pytest

from adventsolver.inputs import (
    USER_AGENT,
    InputUnavailableError,
    fetch_day_input,
    input_path,
    load_cookies,
)


def _cookies(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text(json.dumps({"session": "placeholder"}), encoding="utf-8")
    return path


def _response(body: bytes):
    opener = mock.MagicMock()
    opener.return_value.__enter__.return_value.read.return_value = body
    return opener


def test_input_path_pads_day(tmp_path):
    assert input_path(5, tmp_path) == tmp_path / "input05"
    assert input_path(13, "inputs") == Path("inputs") / "input13"


def test_load_cookies_round_trip(tmp_path):
    assert load_cookies(_cookies(tmp_path)) == {"session": "placeholder"}


def test_load_cookies_rejects_non_object(tmp_path):
    path = tmp_path / "cookies.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_cookies(path)


def test_existing_input_not_downloaded(tmp_path):
    existing = input_path(3, tmp_path)
    existing.write_text("cached", encoding="utf-8")
    with mock.patch("urllib.request.urlopen") as opener:
        result = fetch_day_input(3, tmp_path, tmp_path / "missing.json")
    opener.assert_not_called()
    assert result == existing
    assert result.read_text(encoding="utf-8") == "cached"


def test_download_writes_body(tmp_path):
    inputs_dir = tmp_path / "inputs"
    opener = _response(b"1 2 3\n")
    with mock.patch("urllib.request.urlopen", opener):
        result = fetch_day_input(7, inputs_dir, _cookies(tmp_path))
    assert result == inputs_dir / "input07"
    assert result.read_text(encoding="utf-8") == "1 2 3\n"
    request = opener.call_args.args[0]
    assert request.full_url.endswith("/2023/day/7/input")
    assert request.get_header("Cookie") == "session=placeholder"
    assert request.get_header("User-agent") == USER_AGENT


def test_bad_request_means_not_logged_in(tmp_path):
    error = urllib.error.HTTPError("http://localhost/", 400, "Bad Request", None, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(InputUnavailableError):
            fetch_day_input(1, tmp_path, _cookies(tmp_path))
    assert not input_path(1, tmp_path).exists()


def test_other_http_errors_propagate(tmp_path):
    error = urllib.error.HTTPError("http://localhost/", 500, "Server Error", None, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(urllib.error.HTTPError):
            fetch_day_input(1, tmp_path, _cookies(tmp_path))


def test_input_not_available_yet(tmp_path):
    opener = _response(b"Please don't repeatedly request this endpoint")
    with mock.patch("urllib.request.urlopen", opener):
        with pytest.raises(InputUnavailableError):
            fetch_day_input(25, tmp_path, _cookies(tmp_path))
    assert not input_path(25, tmp_path).exists()