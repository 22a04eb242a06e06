import logging

import pytest
import pandas as pd
from pathlib import Path

from jsoncsvconverter.cli import build_parser, main


@pytest.fixture
def test_assets_dir():
    """Get the path to test assets directory"""
    return Path(__file__).parent.parent / "assets"


class TestCli:

    def test_main_success(self, tmp_path, test_assets_dir):
        output = tmp_path / "nested.csv"

        exit_code = main([str(test_assets_dir / "test_nested.json"), "-o", str(output)])

        assert exit_code == 0
        df = pd.read_csv(output, dtype=str, keep_default_na=False)
        assert list(df.columns) == ['id', 'name', 'contact__email', 'contact__phone']
        assert df.iloc[0].tolist() == ['1', 'John', 'john@email.com', '123-456-7890']

    def test_main_preview_logs_sample(self, tmp_path, test_assets_dir, caplog):
        caplog.set_level(logging.INFO)

        exit_code = main([
            str(test_assets_dir / "test_simple.json"),
            "--output", str(tmp_path / "simple.csv"),
            "--preview",
        ])

        assert exit_code == 0
        assert "Headers: id, name, age" in caplog.text

    def test_main_malformed_json(self, tmp_path, test_assets_dir, caplog):
        output = tmp_path / "invalid.csv"

        exit_code = main([str(test_assets_dir / "invalid.json"), "-o", str(output)])

        assert exit_code == 1
        assert not output.exists()
        assert "Malformed JSON" in caplog.text

    def test_main_non_object_root(self, tmp_path, test_assets_dir, caplog):
        exit_code = main([str(test_assets_dir / "root_array.json"), "-o", str(tmp_path / "out.csv")])

        assert exit_code == 1
        assert "JSON root must be an object" in caplog.text

    def test_main_wrong_extension(self, tmp_path, test_assets_dir):
        assert main([str(test_assets_dir / "not_json.txt"), "-o", str(tmp_path / "out.csv")]) == 1

    def test_main_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_main_requires_input(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    def test_build_parser_defaults(self):
        args = build_parser().parse_args(["data.json"])

        assert args.input == Path("data.json")
        assert args.output is None
        assert args.log_level == "INFO"
        assert args.preview is False
