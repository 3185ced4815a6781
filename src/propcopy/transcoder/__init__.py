"""Property tree transcoding."""

from propcopy.transcoder.tree import (
    PropertyTreeTranscoder,
    Resolver,
    is_empty_composite,
    iter_leaves,
    should_descend,
)

__all__ = [
    "PropertyTreeTranscoder",
    "Resolver",
    "is_empty_composite",
    "iter_leaves",
    "should_descend",
]
