"""
Sequential CSV record reader.

Score logs can grow to tens of millions of rows, so rows are yielded one at a
time and never buffered.
"""

import csv
import logging
from typing import Iterator, List

from scoreboard.utils.leaderboard_exceptions import MalformedSourceError, SourceNotFoundError

logger = logging.getLogger(__name__)


def read_rows(path: str) -> Iterator[List[str]]:
    """
    Yield the records of a comma-delimited file as lists of fields.
    
    Blank lines are skipped. The file is opened lazily on first iteration and
    closed when the generator is exhausted or discarded.
    
    Args:
        path: Path to the CSV file
        
    Raises:
        SourceNotFoundError: If the file cannot be opened
        MalformedSourceError: If the file is not UTF-8 or not parseable as CSV
    """
    try:
        fp = open(path, newline='', encoding='utf-8')
    except OSError as e:
        logger.debug(f"Failed to open {path}: {e}")
        raise SourceNotFoundError(str(path)) from e
    
    with fp:
        reader = csv.reader(fp)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except (UnicodeDecodeError, csv.Error) as e:
                raise MalformedSourceError(str(path), reader.line_num + 1, str(e)) from e
            if not row:
                continue
            yield row
