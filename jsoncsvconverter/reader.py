import logging
from pathlib import Path
from typing import Union

from .constants import JSON_FILE_EXTENSION
from .value_model import decode_json_content

logger = logging.getLogger(__name__)


def read_json_file(path: Union[str, Path]) -> str:
    """
    Read the contents of a JSON file as text.

    The extension is checked before the file is opened, so a misconfigured path
    fails early without touching storage.

    Args:
        path: Location of a file ending in ``.json``

    Returns:
        The complete file contents

    Raises:
        ValueError: If the path does not end with the .json extension
        OSError: If the file cannot be read (missing, permission denied, ...)
    """
    path = Path(path)
    if path.suffix.lower() != JSON_FILE_EXTENSION:
        raise ValueError(f"File must have a {JSON_FILE_EXTENSION} extension: {path}")

    logger.debug(f"Reading JSON file {path}")
    content = decode_json_content(path.read_bytes())
    logger.debug(f"Read {len(content)} characters from {path}")
    return content
