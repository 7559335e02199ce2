"""Extraction of metadata values from the packed labels column.

Samples carry free-form metadata packed into one string column as
pipe-delimited ``key:value`` pairs, e.g. ``|os:linux|zone:us-east1|``.
A metadata field is pulled out at query time with a regular expression.
"""
from __future__ import annotations

DEFAULT_LABELS_COLUMN = "labels"


# TODO: escape regex metacharacters in ``name``; PropertiesValidator rejects
# them today but callers that skip validation can still break the pattern.
def get_regexp_for_metadata(name: str, labels_column: str = DEFAULT_LABELS_COLUMN) -> str:
    """Return the SQL expression that extracts metadata ``name`` from the labels.

    Args:
        name: The metadata key to extract.  Embedded verbatim.
        labels_column: Column holding the packed labels.

    Returns:
        ``REGEXP_EXTRACT(<labels_column>, r"|<name>:(.*?)|")``.  The caller
        decides how to alias the result.  The pipes are left unescaped, so
        the pattern reads as an alternation around ``<name>:(.*?)``; the
        query text existing dashboards were saved with depends on it.
    """
    return f'REGEXP_EXTRACT({labels_column}, r"|{name}:(.*?)|")'
