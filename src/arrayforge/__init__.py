"""Pure helper functions for arrays and collections of records.

Every helper accepts "generic arrays": any mapping (keys as given) or any
non-string sequence (keys are positions). Helpers never mutate their
arguments and always build new result containers.

Public API:
- flat: Flatten nested arrays into one list.
- get_first: First value in iteration order, or a default.
- get: Value stored under a key, or a default.
- get_array: Several keys at once, missing ones mapped to None.
- get_path: Nested value addressed by path notation ("a/b/c"), or a default.
- get_array_path: Several paths at once, unresolved ones mapped to None.
- get_random: Uniformly chosen value, or None for empty arrays.
- number_range: Inclusive numeric range with integer or fractional step.
- sort_by_key: Stable sort of rows by one field.
- categorize: Multi-level grouping of rows by field values.
- assign_keys: Re-key rows by one of their fields.
- column: Values of one field across all rows.
- columns: Projection of every row onto several fields.
- get_row: First row with a field strictly equal to a value.
- get_row_key: Key of that first matching row.
- get_rows: All rows with a field strictly equal to a value.
- get_rows_but: All rows having the field with any other value.
- combine: Dict built from a keys array and a values array.
- combine2: Positional zip of several arrays, padded with None.
- sort_by_priority: Entries reordered so that listed keys come first.
- NOT_FOUND: Falsy marker returned by get_row and get_row_key on no match.
- InvalidArgumentError: Raised for arguments a helper cannot work with.
"""

from ._version_info import __version__
from .array_helpers import (
    ASCENDING,
    DEFAULT_PATH_SEPARATOR,
    DESCENDING,
    NOT_FOUND,
    InvalidArgumentError,
    SortOrder,
    assign_keys,
    categorize,
    column,
    columns,
    combine,
    combine2,
    flat,
    get,
    get_array,
    get_array_path,
    get_first,
    get_path,
    get_random,
    get_row,
    get_row_key,
    get_rows,
    get_rows_but,
    number_range,
    sort_by_key,
    sort_by_priority,
)

__all__ = [
    'ASCENDING',
    'DEFAULT_PATH_SEPARATOR',
    'DESCENDING',
    'InvalidArgumentError',
    'NOT_FOUND',
    'SortOrder',
    '__version__',
    'assign_keys',
    'categorize',
    'column',
    'columns',
    'combine',
    'combine2',
    'flat',
    'get',
    'get_array',
    'get_array_path',
    'get_first',
    'get_path',
    'get_random',
    'get_row',
    'get_row_key',
    'get_rows',
    'get_rows_but',
    'number_range',
    'sort_by_key',
    'sort_by_priority',
]
