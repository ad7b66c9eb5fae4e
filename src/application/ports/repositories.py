"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# DynamoDB の型付き属性値形式 ({"S": "..."}, {"N": "1"}, {"L": [...]}, {"M": {...}})
RawRecord = dict[str, Any]


class StoreQueryError(Exception):
    """テーブルへのクエリ失敗エラー"""

    def __init__(self, table_name: str, cause: BaseException):
        super().__init__(f"Error querying table {table_name}: {cause}")
        self.table_name = table_name
        self.cause = cause


class IExhibitionStore(ABC):
    """
    Exhibition Store Interface

    依存性逆転の原則に従い、アプリケーション層から参照可能な抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    @abstractmethod
    async def query(self, table_name: str, user_id: str) -> list[RawRecord]:
        """
        パーティションキー (ユーザーID) でテーブルを検索

        ソートキーの降順（新しい順）で返す。該当なしの場合は空リスト。

        Raises:
            StoreQueryError: クエリを完了できなかった場合
        """
        pass
