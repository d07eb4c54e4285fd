from ._bimap import BiMap, MutableBiMap
from ._matching import InvalidGraphError, find_matching, find_unmatched
from .__about__ import __version__

__all__ = [
    "BiMap",
    "InvalidGraphError",
    "MutableBiMap",
    "__version__",
    "find_matching",
    "find_unmatched",
]
