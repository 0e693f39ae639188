"""Helpers for arrays and collections of records.

This package provides pure functions over "generic arrays", i.e. mappings
and non-string sequences, including:
- Flattening of nested arrays
- Key and path based access with default values
- Random element selection
- Inclusive numeric ranges
- Row and column selection from collections of records
- Sorting, grouping and re-keying of records
- Positional combining and priority ordering
"""

from .accessors import *
from .combiners import *
from .defaults import *
from .errors import *
from .flattener import *
from .row_organizers import *
from .row_selectors import *
from .sequence_builder import *
