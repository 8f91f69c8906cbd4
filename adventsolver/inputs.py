"""Download and cache daily puzzle inputs."""

from __future__ import annotations

import json
import os
import urllib.error
import urllib.request
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_INPUTS_DIR = "inputs"
DEFAULT_COOKIES_PATH = "cookies.json"
YEAR = 2023
INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"
USER_AGENT = "adventsolver"


class InputUnavailableError(RuntimeError):
    """The puzzle input could not be obtained."""


def input_path(day: int, inputs_dir: PathLike = DEFAULT_INPUTS_DIR) -> Path:
    """Where the input for a day is cached."""
    return Path(inputs_dir) / f"input{day:02d}"


def load_cookies(path: PathLike = DEFAULT_COOKIES_PATH) -> dict[str, str]:
    """Read a JSON object of cookie names and values."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict) or not all(
        isinstance(name, str) and isinstance(value, str) for name, value in data.items()
    ):
        raise ValueError("cookies file must map cookie names to string values")
    return data


def fetch_day_input(
    day: int,
    inputs_dir: PathLike = DEFAULT_INPUTS_DIR,
    cookies_path: PathLike = DEFAULT_COOKIES_PATH,
) -> Path:
    """Make sure the input for a day is on disk, downloading it if needed."""
    path = input_path(day, inputs_dir)
    if path.exists():
        return path

    cookies = load_cookies(cookies_path)
    headers = {"User-Agent": USER_AGENT}
    if cookies:
        headers["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())
    request = urllib.request.Request(
        INPUT_URL.format(year=YEAR, day=day), headers=headers
    )
    try:
        with urllib.request.urlopen(request) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        if exc.code == 400:
            raise InputUnavailableError(
                "Not logged into Advent of Code - try updating your session cookie"
            ) from exc
        raise
    if body.startswith("Please don't"):
        raise InputUnavailableError(f"Input for day {day} is not available yet")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path