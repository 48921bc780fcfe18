# pdfweave

Building blocks for PDF documents. Each module models one part of a PDF
document as plain Python data: dictionaries, lists, `Name` values and
`Stream` objects keyed the way the PDF format names them.

## Modules

- `pdfweave.util`: geometry types (`Posn`, `Dims`, `Rectangle`, `Line`,
  `Matrix`) with `as_pdf_array()` and `to_stream_string()`, the `Name` and
  `Stream` value types, `format_number()` for compact numbers in content
  streams, and the `WindingRule`, `CompressionMethod` and `StrokeOrFill`
  enums.
- `pdfweave.version`: PDF versions (`Version`, ordered by release, default
  `Version.V1_5`) and `TargetVersion`.
- `pdfweave.page_size`: named sizes (`PageSize.A0` to `PageSize.A5`,
  `PageSize.LETTER`, `PageSize.LEGAL`) and custom sizes in points, inches or
  millimetres; negative custom dimensions are clamped to zero.
- `pdfweave.text`: the twelve standard fonts (`StandardFont`), an
  approximate width estimate from an average glyph width, font selection by
  family, weight and slant, and line wrapping by word or by character
  (`WrapMode`, `wrap_text`).
- `pdfweave.resources`: resource categories (`ResourceCategory`) and
  `NamedResources`, which hands out names such as `F0`, `GS0`, `P1`.
- `pdfweave.tree`: name-tree and number-tree nodes (`Tree`); string keys
  give a `Names` entry, integer keys a `Nums` entry.
- `pdfweave.xref`: cross-reference entries and tables (`XRefEntry`,
  `XRefTable`) written to a binary stream; `XRefError` is raised for an empty
  table or a missing free root entry.
- `pdfweave.pattern`: tiling patterns (`TilingPattern`) with a `cache_key()`
  for spotting duplicates.
- `pdfweave.optional_content`: layers (`OptionalContentGroup`) and their
  default configuration (`OptionalContentConfig`, ordered with `LayerSingle`
  and `LayerGroup`).
- `pdfweave.outline`: bookmarks (`OutlineItem`, `DocumentOutline`).
- `pdfweave.shading`: shading dictionaries of types 1 to 7
  (`FunctionShading`, `AxialShading`, `RadialShading`,
  `FreeFormGouraudShading`, `LatticeGouraudShading`, `CoonsPatchShading`,
  `TensorPatchShading`).
- `pdfweave.soft_mask`: soft-mask dictionaries (`SoftMask`, `MaskSubType`).
- `pdfweave.xmp`: XMP metadata packets built from a document's Title,
  Author and Subject (`XmpMetadata`, `escape_xml`).
- `pdfweave.pages`: page trees and pages (`PageTree`, `Page`), with object
  numbers drawn from a function you supply.

Builder methods named `with_...` return the object itself so calls can be
chained. Setting an entry a second time where the format allows only one
raises `ValueError`.

## Installation

```
pip install pdfweave
```

## Examples

Wrapping text to a column width:

```python
from pdfweave.text import StandardFont, WrapMode, wrap_text

lines = wrap_text(
    "This is a long line of text that needs wrapping",
    200.0,
    StandardFont.HELVETICA,
    12.0,
    WrapMode.WORD_WRAP,
)
```

Choosing a font from a family name and style:

```python
from pdfweave.text import StandardFont

font = StandardFont.from_family("Times", 700, True)
print(font.pdf_name())  # Times-BoldItalic
```

Allocating resource names:

```python
from pdfweave.resources import NamedResources, ResourceCategory

resources = NamedResources()
resources.add(ResourceCategory.FONT, 1)      # "F0"
resources.add(ResourceCategory.PATTERN, 8)   # "P0"
resources.add(ResourceCategory.PATTERN, 18)  # "P1"
```

Building a page tree:

```python
from itertools import count

from pdfweave.page_size import PageSize
from pdfweave.pages import PageTree

numbers = count(1)
root = PageTree(lambda: next(numbers)).with_default_page_size(PageSize.A4)
root.add_page_using(b"0 0 m 100 100 l S")
print(root.update_counts())  # 1
```

Building an outline:

```python
from pdfweave.outline import DocumentOutline, OutlineItem

outline = DocumentOutline()
part = OutlineItem("Part 1")
part.add_child(OutlineItem("Chapter 1"))
outline.add_item(part)
print(outline.total_count())  # 2
```

Writing a cross-reference table:

```python
import io

from pdfweave.xref import ObjectStatus, XRefEntry, XRefTable

table = XRefTable()
table.add_entry(XRefEntry(1, 15, ObjectStatus.IN_USE))
buffer = io.BytesIO()
table.serialize(buffer)
```

Page sizes in points:

```python
from pdfweave.page_size import PageSize

dims = PageSize.LETTER.dims_points()
print(dims.width, dims.height)  # 612.0 792.0
```

## What it does not do

pdfweave builds the parts of a document as data; apart from the
cross-reference table it does not write PDF syntax. There is no document
object that assembles a catalog, trailer and body into a file, no encoder for
dictionaries and streams, no content-stream drawing commands, no font
embedding, no images and no encryption. `DocumentOutline.to_dicts()` numbers
every bookmark but builds only the outline root dictionary; its `item_dicts`
list is always empty. It does not read or parse existing PDF files.

## Running the tests

```
pip install "pdfweave[test]"
pytest
```