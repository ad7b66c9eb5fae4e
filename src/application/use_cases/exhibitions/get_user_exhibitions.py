"""Get User Exhibitions Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import structlog

from src.application.use_cases.exhibitions.fetch_exhibitions import ExhibitionFetcher
from src.application.use_cases.exhibitions.project_exhibition import project
from src.domain.exhibition import ExhibitionView

logger = structlog.get_logger()

USER_ID_PARAM = "userID"


class ValidationError(Exception):
    """リクエストパラメータ不正エラー"""

    pass


@dataclass
class GetUserExhibitionsInput:
    """取得入力DTO"""

    user_id: str

    @classmethod
    def from_query(cls, params: Mapping[str, Any] | None) -> GetUserExhibitionsInput:
        """
        クエリパラメータから生成

        Raises:
            ValidationError: userID が存在しない、または空白のみの場合
        """
        user_id = (params or {}).get(USER_ID_PARAM)
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("userID is missing or empty in the query parameters.")
        # 検証のみ前後空白を除去し、パーティションキーは受け取った値のまま使う
        return cls(user_id=user_id)


@dataclass
class GetUserExhibitionsOutput:
    """取得出力DTO"""

    exhibitions: list[ExhibitionView] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """レスポンスボディに変換"""
        return {"exhibitions": [exhibition.to_dict() for exhibition in self.exhibitions]}


class GetUserExhibitionsUseCase:
    """
    ユーザー展示一覧取得 ユースケース

    公開・非公開テーブルから取得したレコードを公開形式へ投影して返す。
    """

    def __init__(self, fetcher: ExhibitionFetcher):
        self._fetcher = fetcher

    async def execute(self, input_data: GetUserExhibitionsInput) -> GetUserExhibitionsOutput:
        """ユースケースを実行"""
        log = logger.bind(user_id=input_data.user_id)
        log.info("get_user_exhibitions_started")

        records = await self._fetcher.fetch_all(input_data.user_id)
        exhibitions = [project(record) for record in records]

        log.info("get_user_exhibitions_completed", count=len(exhibitions))
        return GetUserExhibitionsOutput(exhibitions=exhibitions)
