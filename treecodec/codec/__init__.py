"""Tree codecs.

Exports
- ``prufer``: Prüfer codes, ordinals and stepping over labeled trees.
- ``edges``: ``(child, parent)`` edge lists, the intermediate form of the Prüfer decoder.
- ``LabeledForest``: batched parent arrays of labeled trees as JAX arrays.
"""

from treecodec.codec import edges, prufer
from treecodec.codec.forest_types import LabeledForest, forest_at, to_forest

__all__ = ["edges", "prufer", "LabeledForest", "forest_at", "to_forest"]
