"""
Engine resource repositories.

This module contains repository classes for indices, documents and aliases.
Repositories send requests through the shared transport and return
entity instances.
"""

from esclient.repositories.alias import AliasRepository
from esclient.repositories.base_repository import BaseRepository
from esclient.repositories.document import DocumentRepository
from esclient.repositories.index import IndexRepository

__all__ = [
    "AliasRepository",
    "BaseRepository",
    "DocumentRepository",
    "IndexRepository",
]
