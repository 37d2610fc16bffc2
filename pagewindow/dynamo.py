"""
DynamoDB query collaborator.

DynamoDB has no OFFSET, so the window is produced client side: the boto3
paginator is walked, the first `offset` items are skipped and iteration stops
as soon as `limit` items have been collected.
"""

from typing import Any

from pydantic import BaseModel

from ._logging import logger, redact_key
from .exceptions import handle_dynamo_errors
from .serializer import DynamoSerializer


class DynamoTableQuery:
    """
    Offset/limit query over a DynamoDB table or index.

    Without a partition key the table is scanned; with pk_name and pk_val a
    Query on that partition is issued instead.

    Usage:
        query = DynamoTableQuery(client, "users", model_cls=User)
        pager = SimplePager(max_per_page=20, query=query)
        pager.init()
    """

    def __init__(
        self,
        client: Any,
        table_name: str,
        model_cls: type[BaseModel] | None = None,
        pk_name: str | None = None,
        pk_val: Any = None,
        index_name: str | None = None,
        reverse: bool = False,
    ):
        if (pk_name is None) != (pk_val is None):
            raise ValueError("pk_name and pk_val must be given together")

        self.client = client
        self.table_name = table_name
        self.model_cls = model_cls
        self.pk_name = pk_name
        self.pk_val = pk_val
        self.index_name = index_name
        self.scan_forward = not reverse
        self.serializer = DynamoSerializer()

        self.first_result: int | None = None
        self.max_results: int | None = None

    def set_first_result(self, offset: int | None) -> None:
        self.first_result = offset

    def set_max_results(self, limit: int | None) -> None:
        self.max_results = limit

    @property
    def operation(self) -> str:
        return "scan" if self.pk_name is None else "query"

    def _build_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"TableName": self.table_name}
        if self.index_name:
            kwargs["IndexName"] = self.index_name

        if self.pk_name is not None:
            kwargs["KeyConditionExpression"] = "#pk = :pk"
            kwargs["ExpressionAttributeNames"] = {"#pk": self.pk_name}
            kwargs["ExpressionAttributeValues"] = {
                ":pk": self.serializer.to_dynamo_value(self.pk_val)
            }
            kwargs["ScanIndexForward"] = self.scan_forward

        return kwargs

    def _deserialize(self, item: dict[str, Any]) -> Any:
        raw_data = self.serializer.from_dynamo(item)
        if self.model_cls is None:
            return raw_data
        return self.model_cls.model_validate(raw_data)

    def execute(self) -> list[Any]:
        offset = self.first_result or 0
        limit = self.max_results

        if limit == 0:
            return []

        kwargs = self._build_kwargs()
        if limit is not None:
            # Stop boto3 from reading pages past the window
            kwargs["PaginationConfig"] = {"MaxItems": offset + limit}

        logger.info(
            "Executing window %s",
            self.operation,
            extra={
                "table": self.table_name,
                "index": self.index_name,
                "pk_hash": redact_key(self.pk_val) if self.pk_name is not None else None,
                "offset": offset,
                "limit": limit,
            },
        )

        items: list[Any] = []
        seen = 0
        with handle_dynamo_errors(table_name=self.table_name):
            paginator = self.client.get_paginator(self.operation)
            for page in paginator.paginate(**kwargs):
                for item in page.get("Items", []):
                    seen += 1
                    if seen <= offset:
                        continue
                    items.append(self._deserialize(item))
                    if limit is not None and len(items) >= limit:
                        return items

        return items
