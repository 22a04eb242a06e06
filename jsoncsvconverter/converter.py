import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import CSV_FILE_EXTENSION, SAMPLE_ROW_LIMIT
from .errors import ConversionError
from .reader import read_json_file
from .table import json_to_table
from .writer import write_csv

logger = logging.getLogger(__name__)


def convert_json_to_csv(json_content: Union[str, bytes], output_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Convert JSON content into a CSV file.

    This function processes a JSON document by:
    1. Parsing the text and checking that its root is an object
    2. Flattening nested objects and arrays into partial rows
    3. Collecting the column names in first-seen order
    4. Aligning every row to those columns and writing the CSV file

    Args:
        json_content: The raw JSON document (text or UTF-8 bytes)
        output_path: Where to write the CSV file

    Returns:
        A dictionary containing:
        - output_path: The path of the written file
        - headers: The column names, in output order
        - row_count: Number of data rows written
        - sample_data: Up to SAMPLE_ROW_LIMIT rows as column → value dicts

    Raises:
        JSONSyntaxError: If the content is not well-formed JSON
        StructuralError: If the document cannot be flattened
        ConversionError: If the CSV file cannot be written
    """
    # Parse, validate and flatten; failures here leave no output file behind
    table = json_to_table(json_content)
    logger.debug(f"Flattened document into {len(table.headers)} columns and {table.row_count} rows")

    try:
        written = write_csv(table.headers, table.rows, output_path)
    except (OSError, ValueError) as e:
        raise ConversionError(f"Error converting JSON to CSV: {str(e)}") from e

    return {
        'output_path': str(written),
        'headers': table.headers,
        'row_count': table.row_count,
        'sample_data': table.as_records()[:SAMPLE_ROW_LIMIT],
    }


def default_output_path(input_path: Union[str, Path]) -> Path:
    return Path(input_path).with_suffix(CSV_FILE_EXTENSION)


def convert_json_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Read a .json file and convert it into a CSV file.

    When no output path is given the CSV is written next to the input, with the
    same name and a .csv extension.
    """
    json_content = read_json_file(input_path)
    if output_path is None:
        output_path = default_output_path(input_path)

    logger.info(f"Converting {input_path} to {output_path}")
    return convert_json_to_csv(json_content, output_path)
