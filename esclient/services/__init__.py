"""Engine service classes for search operations."""

from esclient.services.base_service import BaseService
from esclient.services.search_service import SearchService, build_msearch_body

__all__ = [
    "BaseService",
    "SearchService",
    "build_msearch_body",
]
