"""Locale file format parsers.

Each parser turns the text of one file into plain Python data. The loader
only relies on this table; hosts can pass their own to support more formats.
"""

import json
import tomllib
from typing import Any, Callable, Dict

import yaml

Parser = Callable[[str], Any]


def parse_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def parse_json(text: str) -> Any:
    return json.loads(text)


def parse_toml(text: str) -> Any:
    return tomllib.loads(text)


# Extension (without dot) -> parser
PARSERS: Dict[str, Parser] = {
    "yml": parse_yaml,
    "yaml": parse_yaml,
    "json": parse_json,
    "toml": parse_toml,
}

# Exceptions a parser raises for malformed content
PARSE_ERRORS = (
    yaml.YAMLError,
    json.JSONDecodeError,
    tomllib.TOMLDecodeError,
    ValueError,
)
