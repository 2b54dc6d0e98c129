"""Generic disjoint-set (union-find) data structure.

This package provides:
- DisjointSet (disjointset.disjoint_set): union by rank over an element → parent dict
- Strategies (disjointset.strategies): pluggable root finding with path compression
- Configuration (disjointset.config): declarative construction
- Spanning (disjointset.spanning): Kruskal spanning forests and connected components
- Audit (disjointset.audit): structured JSONL event logging
- CLI (disjointset.cli): command-line interface
"""

__version__ = "0.1.0"
__license__ = "MIT"

from disjointset.config import DisjointSetConfig, create_disjoint_set
from disjointset.disjoint_set import DisjointSet
from disjointset.errors import (
    DisjointSetError,
    EdgeFormatError,
    ElementNotFoundError,
    InvalidConfigurationError,
    NullElementError,
)
from disjointset.strategies import (
    FindCompressStrategy,
    FullCompression,
    PathHalvingCompression,
    create_strategy,
)

__all__ = [
    "__version__",
    "__license__",
    "DisjointSet",
    "DisjointSetConfig",
    "create_disjoint_set",
    "FindCompressStrategy",
    "FullCompression",
    "PathHalvingCompression",
    "create_strategy",
    "DisjointSetError",
    "NullElementError",
    "ElementNotFoundError",
    "InvalidConfigurationError",
    "EdgeFormatError",
]
