"""Alias repository."""

import json
from http import HTTPStatus
from typing import Any

from opensearchpy.client.utils import _make_path

from esclient.entities import Response
from esclient.errors import SearchEngineError
from esclient.logging import get_logger
from esclient.repositories.base_repository import BaseRepository

logger = get_logger(__name__)


class AliasRepository(BaseRepository):
    """Repository for index aliases."""

    def indices(self, alias: str) -> list[str]:
        """Return the names of the indices the alias points to.

        An alias that does not exist yields an empty list.

        Raises:
            SearchEngineError: If the engine answers with any other error status
        """
        response = self._transport.perform_request("GET", _make_path("*", "_alias", alias))
        if response.status == HTTPStatus.NOT_FOUND:
            return []
        if response.status >= HTTPStatus.BAD_REQUEST:
            raise SearchEngineError(response.body, status=response.status)
        by_index: dict[str, Any] = response.json()
        return list(by_index)

    def update(self, remove: list[str], add: list[str], alias: str) -> Response:
        """Move an alias off the ``remove`` indices and onto the ``add`` ones.

        The engine applies the whole action list atomically.
        """
        logger.info("Updating alias %s: remove=%s add=%s", alias, remove, add)
        body = json.dumps(build_alias_actions(remove=remove, add=add, alias=alias))
        return self._transport.perform_request("POST", "/_aliases", body=body).parse(Response)

    def delete(self, alias: str) -> Response:
        """Detach the alias from every index it points to."""
        indices = self.indices(alias)
        if not indices:
            # The engine rejects an empty action list
            return Response(acknowledged=True)
        return self.update(remove=indices, add=[], alias=alias)


def build_alias_actions(*, remove: list[str], add: list[str], alias: str) -> dict[str, Any]:
    """Build the ``_aliases`` request body, every removal before every addition."""
    actions = [{"remove": {"index": index, "alias": alias}} for index in remove]
    actions.extend({"add": {"index": index, "alias": alias}} for index in add)
    return {"actions": actions}
