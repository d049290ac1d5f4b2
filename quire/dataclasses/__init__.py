"""
Dataclasses package for Quire.

- ManuscriptEntry: one output document and its resolved themes
- DocumentMetadata: title and themes declared in a document's front-matter
"""

from quire.dataclasses.entry import ManuscriptEntry
from quire.dataclasses.metadata import DocumentMetadata

__all__ = ["ManuscriptEntry", "DocumentMetadata"]
