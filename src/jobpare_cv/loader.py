import json
import logging
from pathlib import Path
from typing import Any, Union

from jobpare_cv.exceptions import InputLoadError, InputMalformed, InputNotFound

logger = logging.getLogger(__name__)


def parse_document(text: str, source: str = "<string>") -> Any:
    """
    Parses CV data from raw JSON text.

    Args:
        text (str): The JSON text.
        source (str): Name used in error messages.

    Returns:
        The parsed document (usually a dict).

    Raises:
        InputMalformed: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InputMalformed(f"Invalid JSON in '{source}': {e}") from e


def load_document(path: Union[str, Path]) -> Any:
    """
    Loads CV data from a JSON file.

    Args:
        path (str | Path): Path to the JSON input file.

    Returns:
        The parsed document.

    Raises:
        InputNotFound: If the file does not exist.
        InputMalformed: If the file is not valid JSON.
        InputLoadError: If the file cannot be read for any other reason.
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFound(f"Input file '{path}' not found.")

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputNotFound(f"Input file '{path}' not found.") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputLoadError(f"Could not read input file '{path}': {e}") from e

    document = parse_document(text, source=str(path))
    logger.debug("Loaded %d bytes of CV data from %s", len(text), path)
    return document
