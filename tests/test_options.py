from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from inlineassets.core.options import normalize_extensions, normalize_limit, normalize_options


def test_defaults_when_options_missing() -> None:
    config = normalize_options(None)
    assert config.extensions == (".jpg", ".jpeg", ".png", ".svg")
    assert config.size_limit == 10240
    assert config.data_uri_encoding == "base64"


@pytest.mark.parametrize(
    "exts",
    [None, [], "png", ["", 3, None], {"png": True}, 42],
)
def test_malformed_extensions_fall_back_to_defaults(exts: object) -> None:
    assert normalize_extensions(exts) == (".jpg", ".jpeg", ".png", ".svg")


def test_extensions_are_dotted_and_deduplicated() -> None:
    assert normalize_extensions(["png", ".gif", "png", 7]) == (".png", ".gif")


@pytest.mark.parametrize(
    "exts",
    [None, ["png"], [".webp", "avif"], ["."], [1, 2], ("ico",)],
)
def test_extensions_never_empty_and_always_dotted(exts: object) -> None:
    normalized = normalize_options({"exts": exts}).extensions
    assert normalized
    assert all(ext.startswith(".") for ext in normalized)


@pytest.mark.parametrize(
    ("limit", "expected"),
    [
        (False, 0),
        (True, 10240),
        ("2048", 2048),
        (" 512 ", 512),
        (4096, 4096),
        (100.9, 100),
        (None, 0),
        ("", 0),
        ("   ", 0),
        ("0x10", 16),
        ("0o17", 15),
        ("0b101", 5),
        ("010", 10),
        ("1e3", 1000),
        ("12px", 10240),
        ("1_000", 10240),
        ("Infinity", 10240),
        ("lots", 10240),
        (float("nan"), 10240),
        (float("inf"), 10240),
        (-5, 0),
        ([1], 10240),
    ],
)
def test_limit_coercion(limit: object, expected: int) -> None:
    assert normalize_limit(limit) == expected


def test_encoding_requires_non_empty_string() -> None:
    assert normalize_options({"encoding": "hex"}).data_uri_encoding == "hex"
    assert normalize_options({"encoding": ""}).data_uri_encoding == "base64"
    assert normalize_options({"encoding": 64}).data_uri_encoding == "base64"


def test_attribute_style_options() -> None:
    config = normalize_options(SimpleNamespace(exts=["png"], limit="100", encoding="base64url"))
    assert config.to_dict() == {"exts": [".png"], "limit": 100, "encoding": "base64url"}


def test_missing_limit_differs_from_explicit_none() -> None:
    assert normalize_options({}).size_limit == 10240
    assert normalize_options({"limit": None}).size_limit == 0
    assert normalize_options(SimpleNamespace(limit=None)).size_limit == 0
    assert normalize_options(SimpleNamespace()).size_limit == 10240
    assert normalize_limit() == 10240
