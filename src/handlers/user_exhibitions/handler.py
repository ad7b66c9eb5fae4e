"""
User Exhibitions Lambda Handler

GET /exhibitions?userID=<id>

公開 (PublicExhibitions) と非公開 (PrivateExhibitions) の 2 テーブルを
並行検索し、結合した展示一覧を JSON で返す。

レスポンス:
- 200: {"exhibitions": [...]}
- 400: {"message": "userID is missing or empty in the query parameters."}
- 500: {"message": "...", "error": "<cause>"}
"""
import asyncio
import json
import uuid
from functools import lru_cache
from typing import Any

import structlog

from src.application.ports.repositories import StoreQueryError
from src.application.use_cases.exhibitions import (
    ExhibitionFetcher,
    GetUserExhibitionsInput,
    GetUserExhibitionsUseCase,
    ValidationError,
)
from src.infrastructure.config import configure_logging, get_settings
from src.infrastructure.repositories import DynamoDBExhibitionStore, create_dynamodb_client

logger = structlog.get_logger()

DATABASE_ERROR_MESSAGE = "An error occurred while querying the database."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


@lru_cache()
def get_dynamodb_client() -> Any:
    """DynamoDB クライアント（コンテナ再利用時はキャッシュ）"""
    return create_dynamodb_client(get_settings())


def build_use_case() -> GetUserExhibitionsUseCase:
    """設定からユースケースを組み立てる"""
    settings = get_settings()
    fetcher = ExhibitionFetcher(
        store=DynamoDBExhibitionStore(get_dynamodb_client()),
        public_table=settings.public_table,
        private_table=settings.private_table,
    )
    return GetUserExhibitionsUseCase(fetcher)


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    try:
        configure_logging(get_settings().log_level)
        return handle_request(event, build_use_case())
    except Exception as e:
        # 設定読み込み・ユースケース組み立て時の失敗など
        logger.exception("unexpected_error", error=str(e))
        return response(500, {"message": UNEXPECTED_ERROR_MESSAGE, "error": str(e)})
    finally:
        structlog.contextvars.clear_contextvars()


def handle_request(event: dict, use_case: GetUserExhibitionsUseCase) -> dict:
    """
    リクエストを処理

    検証 → 取得 → 投影 → レスポンス生成。
    どの段階で失敗しても整形済み JSON レスポンスを返す。
    """
    request_context = event.get("requestContext") or {}
    http_info = request_context.get("http") or {}
    logger.info(
        "request_received",
        method=http_info.get("method") or event.get("httpMethod"),
        path=http_info.get("path") or event.get("path") or event.get("rawPath"),
        query=event.get("queryStringParameters"),
    )

    try:
        input_data = GetUserExhibitionsInput.from_query(event.get("queryStringParameters"))
    except ValidationError as e:
        logger.warning("validation_failed", error=str(e))
        return response(400, {"message": str(e)})

    try:
        output = asyncio.run(use_case.execute(input_data))
    except StoreQueryError as e:
        logger.error(
            "store_query_failed",
            table_name=e.table_name,
            error=str(e.cause),
            exc_info=True,
        )
        return response(500, {"message": DATABASE_ERROR_MESSAGE, "error": str(e.cause)})
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        return response(500, {"message": UNEXPECTED_ERROR_MESSAGE, "error": str(e)})

    logger.info("request_completed", count=len(output.exhibitions))
    return response(200, output.to_dict())


def response(status_code: int, body: dict) -> dict:
    """API Gateway レスポンス形式"""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
        },
        "body": json.dumps(body),
    }
