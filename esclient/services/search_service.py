"""Search service for engine queries."""

from typing import Any

from opensearchpy.client.utils import _make_path

from esclient.entities import MSearchQuery, MSearchResult, Response, SearchResult
from esclient.services.base_service import BaseService
from esclient.transport import NDJSON_CONTENT_TYPE


class SearchService(BaseService):
    """Search, multi-search, search templates and suggestions."""

    def search(
        self, index_name: str, doc_type: str, data: str, explain: bool = False
    ) -> SearchResult:
        """Execute a search query.

        Args:
            index_name: Index (or comma separated indices) to search
            doc_type: Document type to restrict the search to, empty for all types
            data: JSON query body
            explain: Ask the engine to explain how each hit was scored
        """
        return self._transport.perform_request(
            "POST",
            _make_path(index_name, doc_type, "_search"),
            body=data,
            params=_explain_params(explain),
        ).parse(SearchResult)

    def msearch(self, queries: list[MSearchQuery]) -> MSearchResult:
        """Execute several queries in one request."""
        return self._transport.perform_request(
            "POST", "/_msearch", body=build_msearch_body(queries), content_type=NDJSON_CONTENT_TYPE
        ).parse(MSearchResult)

    def create_template(self, name: str, template: str) -> Response:
        """Store a search template under ``name``."""
        return self._transport.perform_request(
            "POST", _make_path("_search", "template", name), body=template
        ).parse(Response)

    def search_template(self, index_name: str, data: str, explain: bool = False) -> SearchResult:
        """Execute a search through a stored or inline template."""
        return self._transport.perform_request(
            "POST",
            _make_path(index_name, "_search", "template"),
            body=data,
            params=_explain_params(explain),
        ).parse(SearchResult)

    def suggest(self, index_name: str, data: str) -> Any:
        """Run the suggesters described in ``data`` and return the decoded answer."""
        return self._transport.perform_request(
            "POST", _make_path(index_name, "_suggest"), body=data
        ).json()


def build_msearch_body(queries: list[MSearchQuery]) -> str:
    """Serialize queries as newline-delimited header/body pairs.

    Each header and body must sit on a single line, so embedded newlines
    are flattened to spaces. The body must end with a newline.
    """
    lines: list[str] = []
    for query in queries:
        lines.append(_single_line(query.header))
        lines.append(_single_line(query.body))
    return "\n".join(lines) + "\n"


def _single_line(value: str) -> str:
    return value.replace("\r", " ").replace("\n", " ")


def _explain_params(explain: bool) -> dict[str, str] | None:
    return {"explain": "true"} if explain else None
