import csv
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

logger = logging.getLogger(__name__)


def write_csv(
    headers: Sequence[str],
    rows: Optional[List[Sequence[str]]],
    output_path: Union[str, Path],
) -> Path:
    """
    Write a header line and aligned rows to a CSV file.

    Every field is quoted. Passing no rows writes a file holding only the header
    line. Missing parent directories are created.

    Args:
        headers: Column names, in output order
        rows: Rows of cell text, each with one value per header (may be None or empty)
        output_path: Destination file

    Returns:
        The path that was written

    Raises:
        ValueError: If headers are empty or a row does not match the header width
        OSError: If the file or its parent directories cannot be created
    """
    if not headers:
        raise ValueError("Headers cannot be null or empty.")

    rows = list(rows or [])
    for index, row in enumerate(rows):
        if len(row) != len(headers):
            raise ValueError(
                f"Row {index} has {len(row)} values but there are {len(headers)} headers"
            )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(rows, columns=list(headers), dtype=str)
    df.to_csv(
        output_path,
        index=False,
        quoting=csv.QUOTE_ALL,
        lineterminator='\n',
        encoding='utf-8',
    )

    logger.info(f"Wrote {len(rows)} rows x {len(headers)} columns to {output_path}")
    return output_path
