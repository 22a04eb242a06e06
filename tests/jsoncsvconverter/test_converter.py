import pytest
import pandas as pd
from pathlib import Path
from unittest.mock import patch

from jsoncsvconverter.converter import convert_json_file, convert_json_to_csv, default_output_path
from jsoncsvconverter.errors import ConversionError, JSONSyntaxError, StructuralError


@pytest.fixture
def test_assets_dir():
    """Get the path to test assets directory"""
    return Path(__file__).parent.parent / "assets"


def read_back(path) -> pd.DataFrame:
    return pd.read_csv(path, dtype=str, keep_default_na=False)


class TestConverter:

    def test_convert_json_to_csv_success(self, tmp_path, test_assets_dir):
        with open(test_assets_dir / "test_projects.json", 'rb') as f:
            json_data = f.read()

        output = tmp_path / "projects.csv"
        result = convert_json_to_csv(json_data, output)

        # Verify return structure
        assert result['output_path'] == str(output)
        assert result['headers'] == ['id', 'name', 'projects__title', 'projects__status']
        assert result['row_count'] == 2
        assert result['sample_data'][0] == {
            'id': '3',
            'name': 'Charlie',
            'projects__title': 'Project A',
            'projects__status': 'completed',
        }
        assert result['sample_data'][1]['id'] == ''
        assert result['sample_data'][1]['projects__status'] == 'in-progress'

        # Verify the written file
        df = read_back(output)
        assert list(df.columns) == result['headers']
        assert df.iloc[1].tolist() == ['', '', 'Project B', 'in-progress']

    def test_convert_json_to_csv_sample_is_limited(self, tmp_path):
        json_data = '{"id": 1, "values": [1, 2, 3, 4, 5, 6, 7]}'

        result = convert_json_to_csv(json_data, tmp_path / "values.csv")

        assert result['row_count'] == 7
        assert len(result['sample_data']) == 5
        assert len(read_back(tmp_path / "values.csv")) == 7

    def test_convert_json_to_csv_invalid_json(self, tmp_path):
        output = tmp_path / "out.csv"

        with pytest.raises(JSONSyntaxError):
            convert_json_to_csv(b'invalid json', output)

        assert not output.exists()

    def test_convert_json_to_csv_not_object(self, tmp_path, test_assets_dir):
        with open(test_assets_dir / "root_array.json", 'rb') as f:
            json_data = f.read()
        output = tmp_path / "out.csv"

        with pytest.raises(StructuralError) as exc_info:
            convert_json_to_csv(json_data, output)

        assert "JSON root must be an object" in str(exc_info.value)
        assert not output.exists()

    def test_convert_json_to_csv_empty_object(self, tmp_path):
        # An empty object has no columns, which the CSV writer refuses
        with pytest.raises(ConversionError) as exc_info:
            convert_json_to_csv('{}', tmp_path / "out.csv")

        assert "Error converting JSON to CSV" in str(exc_info.value)
        assert "Headers cannot be null or empty." in str(exc_info.value)

    def test_convert_json_to_csv_write_failure(self, tmp_path):
        with patch('jsoncsvconverter.converter.write_csv', side_effect=PermissionError("denied")):
            with pytest.raises(ConversionError) as exc_info:
                convert_json_to_csv('{"id": 1}', tmp_path / "out.csv")

        assert "Error converting JSON to CSV: denied" in str(exc_info.value)

    def test_convert_json_file_default_output(self, tmp_path, test_assets_dir):
        source = tmp_path / "people.json"
        source.write_bytes((test_assets_dir / "test_primitive_arrays.json").read_bytes())

        result = convert_json_file(source)

        expected = tmp_path / "people.csv"
        assert result['output_path'] == str(expected)
        df = read_back(expected)
        assert list(df.columns) == ['id', 'name', 'hobbies', 'languages']
        assert df.values.tolist() == [
            ['2', 'Bob', 'reading', 'English'],
            ['', '', 'cycling', 'Spanish'],
            ['', '', 'gaming', ''],
        ]

    def test_convert_json_file_explicit_output(self, tmp_path, test_assets_dir):
        output = tmp_path / "out" / "complex.csv"

        result = convert_json_file(test_assets_dir / "test_complex.json", output)

        assert result['row_count'] == 4
        assert output.exists()
        assert read_back(output)['skills'].tolist() == ['', '', 'Java', 'Python']

    def test_convert_json_file_wrong_extension(self, tmp_path, test_assets_dir):
        with pytest.raises(ValueError) as exc_info:
            convert_json_file(test_assets_dir / "not_json.txt", tmp_path / "out.csv")

        assert "File must have a .json extension" in str(exc_info.value)

    def test_default_output_path(self):
        assert default_output_path("data/input.json") == Path("data/input.csv")
