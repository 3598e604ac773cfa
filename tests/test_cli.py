"""Tests for the command line entry point."""

from __future__ import annotations

import csv
from pathlib import Path
from unittest.mock import patch

import pytest

from netvoyager.cli import build_parser, config_from_args, main
from netvoyager.exceptions import FetchError
from netvoyager.schemas import ExtractionMode


@pytest.fixture(autouse=True)
def _no_log_handlers():
    with patch("netvoyager.cli.configure_logging"):
        yield


class TestConfigFromArgs:
    """Tests for argument to config mapping."""

    def test_default_preset_is_hydrogen(self) -> None:
        config = config_from_args(build_parser().parse_args([]))

        assert config.url == "https://en.wikipedia.org/wiki/Hydrogen"
        assert config.selector == "p"
        assert config.mode is ExtractionMode.FIRST_NONEMPTY

    def test_elements_preset(self) -> None:
        config = config_from_args(build_parser().parse_args(["--preset", "elements"]))

        assert config.url == "https://en.wikipedia.org/wiki/Chemical_element"
        assert config.selector == "h2"
        assert config.mode is ExtractionMode.ALL

    def test_flags_override_preset(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            [
                "--url",
                "https://example.com",
                "--selector",
                "li",
                "--mode",
                "all",
                "--output",
                str(tmp_path / "out.csv"),
            ]
        )

        config = config_from_args(args)

        assert config.url == "https://example.com"
        assert config.selector == "li"
        assert config.mode is ExtractionMode.ALL
        assert config.output_path == tmp_path / "out.csv"


class TestMain:
    """Tests for main()."""

    def test_writes_data_csv_in_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, paragraphs_html: str
    ) -> None:
        monkeypatch.chdir(tmp_path)

        with patch(
            "netvoyager.extractor.fetch_page", return_value=paragraphs_html
        ) as mock_fetch:
            exit_code = main([])

        assert exit_code == 0
        mock_fetch.assert_called_once_with(
            "https://en.wikipedia.org/wiki/Hydrogen", client=None
        )
        with open(tmp_path / "data.csv", newline="", encoding="utf-8") as handle:
            assert list(csv.reader(handle)) == [['["Hello"]']]

    def test_error_exits_non_zero(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)

        with patch(
            "netvoyager.extractor.fetch_page",
            side_effect=FetchError("Page not found at https://en.wikipedia.org/wiki/Hydrogen"),
        ):
            exit_code = main([])

        assert exit_code == 1
        assert "netvoyager: error: Page not found" in capsys.readouterr().err
        assert not (tmp_path / "data.csv").exists()

    def test_selection_empty_exits_non_zero(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        paragraphs_html: str,
    ) -> None:
        monkeypatch.chdir(tmp_path)

        with patch("netvoyager.extractor.fetch_page", return_value=paragraphs_html):
            exit_code = main(["--selector", "table"])

        assert exit_code == 1
        assert "Selector matched no text" in capsys.readouterr().err

    def test_invalid_url_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--url", "not-a-url"])

        assert excinfo.value.code == 2

    @pytest.mark.parametrize("flag", ["--url", "--selector"])
    def test_empty_override_is_usage_error(self, flag: str) -> None:
        """An explicitly empty value is validated, not replaced by the preset."""
        with pytest.raises(SystemExit) as excinfo:
            main([flag, ""])

        assert excinfo.value.code == 2
