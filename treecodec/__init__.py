"""Treecodec: labeled rooted trees and their Prüfer codes.

## Features

### Codecs
- Edge lists (child, optional parent)
- Prüfer codes, generic over the label order when encoding
- Batched parent arrays as JAX forests

### Enumeration
- Arbitrary-precision ordinals of labeled trees (bijective base-n)
- Direct decoding of the k-th tree for a node count
- Next/previous stepping, crossing node counts or wrapping within one
- Cartesian enumeration of every labeled tree on n nodes
"""

__version__ = "0.1.0"
__author__ = "Luke Thompson"
__email__ = "luke.thompson@sydney.edu.au"
__license__ = "MIT"
