from typing import Any

import httpx
from loguru import logger

from odyssey.core.base_client import BaseClient
from odyssey.core.exceptions import StoreUnavailableError
from odyssey.core.version import __version__


class FirestoreClient(BaseClient):
    """
    Read-only client for the Firestore REST API.
    """

    def __init__(
        self,
        project_id: str,
        database: str = "(default)",
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"Odyssey/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(
            base_url=f"https://firestore.googleapis.com/v1/projects/{project_id}/databases/{database}",
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        self.project_id = project_id
        self.api_key = api_key

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Override request to include the API key when one is configured."""
        if self.api_key:
            params = kwargs.get("params") or {}
            params["key"] = self.api_key
            kwargs["params"] = params
        return await super()._request(method, url, **kwargs)

    async def run_query(
        self, collection: str, order_by: str = "date", descending: bool = True
    ) -> list[dict[str, Any]]:
        """Return every document of ``collection`` ordered by ``order_by``."""
        body = {
            "structuredQuery": {
                "from": [{"collectionId": collection}],
                "orderBy": [
                    {
                        "field": {"fieldPath": order_by},
                        "direction": "DESCENDING" if descending else "ASCENDING",
                    }
                ],
            }
        }
        try:
            data = await self.post("/documents:runQuery", json=body)
        except ValueError as e:
            raise StoreUnavailableError(f"runQuery on '{collection}' returned invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise StoreUnavailableError(f"Unexpected runQuery payload for '{collection}'")

        # Rows without a document only carry read metadata
        documents = [row["document"] for row in data if isinstance(row, dict) and row.get("document")]
        logger.debug(f"Firestore runQuery on '{collection}' returned {len(documents)} documents")
        return documents
