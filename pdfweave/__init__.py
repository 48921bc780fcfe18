"""Building blocks for PDF documents: page trees, resources, outlines, layers,
shadings, patterns, soft masks, XMP metadata and cross-reference tables."""

__version__ = "0.1.0"

__all__ = [
    "optional_content",
    "outline",
    "page_size",
    "pages",
    "pattern",
    "resources",
    "shading",
    "soft_mask",
    "text",
    "tree",
    "util",
    "version",
    "xmp",
    "xref",
]