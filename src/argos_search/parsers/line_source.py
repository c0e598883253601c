"""
Reading export files into memory as an ordered list of lines.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; form feeds, U+2028 etc. stay inside it
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_lines(
    path: Union[str, Path],
    encodings: Optional[Sequence[str]] = None
) -> List[str]:
    """
    Read a text file as a list of lines without line terminators.

    Argos exports are usually UTF-8 (sometimes with BOM) but files saved
    on Windows machines may be cp1252, so encodings are tried in order.

    Args:
        path: Export file path
        encodings: Encodings to try; defaults to AppConfig.input_encodings

    Returns:
        Lines in document order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If no encoding could decode the file
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    if encodings is None:
        from argos_search.config import get_app_config
        encodings = get_app_config().input_encodings

    last_error = None

    for encoding in encodings:
        try:
            text = path.read_text(encoding=encoding)
            break  # Success - stop trying
        except UnicodeDecodeError as e:
            logger.debug(f"Could not decode {path} as {encoding}: {e}")
            last_error = e
            continue
    else:
        raise ValueError(
            f"Failed to decode {path} with any of {list(encodings)}. "
            f"Last error: {last_error}"
        )

    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    logger.debug(f"Read {len(lines)} lines from {path} ({encoding})")
    return lines
