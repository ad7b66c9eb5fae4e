"""DynamoDB Exhibition Store Implementation"""
from __future__ import annotations

import asyncio
from typing import Any

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.repositories import IExhibitionStore, RawRecord, StoreQueryError
from src.infrastructure.config import Settings

logger = structlog.get_logger()


def create_dynamodb_client(settings: Settings) -> Any:
    """設定から低レベル DynamoDB クライアントを生成"""
    config = Config(
        region_name=settings.aws_region,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"max_attempts": settings.max_attempts, "mode": "standard"},
    )
    return boto3.client(
        "dynamodb",
        endpoint_url=settings.dynamodb_endpoint_url,
        config=config,
    )


class DynamoDBExhibitionStore(IExhibitionStore):
    """
    DynamoDB ベースの Exhibition Store

    テーブル設計:
    - PK: ユーザーID
    - SK: ExhibitionID

    boto3 クライアントは同期 API のため、イベントループの
    デフォルト Executor 上で実行して複数クエリを並行させる。
    """

    def __init__(self, client: Any):
        self._client = client

    async def query(self, table_name: str, user_id: str) -> list[RawRecord]:
        """パーティションキーでテーブルを検索（SK 降順）"""
        log = logger.bind(table_name=table_name, user_id=user_id)
        log.info("querying_table")

        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(
                None, lambda: self._query_partition(table_name, user_id)
            )
        except (ClientError, BotoCoreError) as e:
            log.error("query_failed", error=str(e))
            raise StoreQueryError(table_name, e) from e

        items = response.get("Items", []) if isinstance(response, dict) else None
        if not isinstance(items, list):
            error = ValueError("Malformed query response: Items is not a list")
            log.error("query_failed", error=str(error))
            raise StoreQueryError(table_name, error)

        # ページネーションは行わない（最初のページのみ返す）
        if response.get("LastEvaluatedKey"):
            log.warning("partition_truncated", returned=len(items))

        log.info("table_queried", count=len(items))
        return items

    def _query_partition(self, table_name: str, user_id: str) -> dict[str, Any]:
        return self._client.query(
            TableName=table_name,
            KeyConditionExpression="PK = :userId",
            ExpressionAttributeValues={":userId": {"S": user_id}},
            ScanIndexForward=False,
        )
