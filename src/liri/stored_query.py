"""
Stored query - Reads the song query kept in the fallback text file.
"""

from pathlib import Path
from typing import Union

from .errors import DataSourceError

DELIMITER = ","
QUERY_FIELD = 1


def parse_stored_query(content: str) -> str:
    """
    Extract the song query from the fallback file's content.

    The query is the second comma-delimited field, with surrounding
    whitespace and one pair of double quotes removed.

    Raises:
        DataSourceError: If there is no second field or it is empty
    """
    fields = content.split(DELIMITER)
    if len(fields) <= QUERY_FIELD:
        raise DataSourceError("Fallback file has no comma-delimited song query.")

    query = fields[QUERY_FIELD].strip()
    if len(query) >= 2 and query.startswith('"') and query.endswith('"'):
        query = query[1:-1].strip()
    if not query:
        raise DataSourceError("Fallback file's song query is empty.")
    return query


def read_stored_query(path: Union[str, Path]) -> str:
    """Read the fallback file in full and return its song query."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"Cannot read fallback file {path}: {e}") from e
    return parse_stored_query(content)
