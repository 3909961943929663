from decimal import Decimal
from pathlib import Path

import pytest
from billzy.receipt.ocr_parser.common import DEFAULT_PARSER_SETTINGS, ParserSettings, build_parser_settings
from billzy.runtime import load_parser_settings


def test_missing_config_gives_defaults() -> None:
    assert load_parser_settings() == DEFAULT_PARSER_SETTINGS


def test_loads_parser_table_from_config_home(isolated_config_home: Path) -> None:
    (isolated_config_home / "parser.toml").write_text(
        "[parser]\nmax_price = 500\nreconcile_tolerance = 0.05\nflag_uncertain = false\n",
        encoding="utf-8",
    )

    settings = load_parser_settings()

    assert settings == ParserSettings(
        max_price=Decimal("500"),
        reconcile_tolerance=Decimal("0.05"),
        flag_uncertain=False,
    )


def test_explicit_config_path_overrides_config_home(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('[parser]\nmin_price = "0.50"\nmerchant_scan_lines = 3\n', encoding="utf-8")

    settings = load_parser_settings(str(path))

    assert settings.min_price == Decimal("0.50")
    assert settings.merchant_scan_lines == 3
    assert settings.max_price == DEFAULT_PARSER_SETTINGS.max_price


def test_file_without_parser_table_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "other.toml"
    path.write_text('[split]\ncurrency = "USD"\n', encoding="utf-8")

    assert load_parser_settings(str(path)) == DEFAULT_PARSER_SETTINGS


def test_parser_key_must_be_a_table(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text('parser = "strict"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="must be a table"):
        load_parser_settings(str(path))


@pytest.mark.parametrize(
    "config",
    [
        {"min_price": 0},
        {"min_price": "5", "max_price": "1"},
        {"max_price": "lots"},
        {"reconcile_tolerance": -1},
        {"merchant_scan_lines": 0},
    ],
)
def test_build_parser_settings_rejects_invalid_values(config: dict) -> None:
    with pytest.raises(ValueError):
        build_parser_settings(config)


def test_build_parser_settings_empty_config_is_default() -> None:
    assert build_parser_settings({}) is DEFAULT_PARSER_SETTINGS
    assert build_parser_settings(None) is DEFAULT_PARSER_SETTINGS
