"""Text extractors for namespace markers and documentation blocks."""

from .blocks import BlockSegmenter, count_openers, extract_blocks, segment_blocks
from .namespace import NamespaceExtractor, extract_namespace, find_namespace

__all__ = [
    "BlockSegmenter",
    "NamespaceExtractor",
    "count_openers",
    "extract_blocks",
    "extract_namespace",
    "find_namespace",
    "segment_blocks",
]
