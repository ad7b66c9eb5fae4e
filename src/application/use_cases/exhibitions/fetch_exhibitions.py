"""Dual-Source Exhibition Fetcher"""
from __future__ import annotations

import asyncio

import structlog

from src.application.ports.repositories import IExhibitionStore, RawRecord, StoreQueryError

logger = structlog.get_logger()


class ExhibitionFetcher:
    """
    公開・非公開の 2 テーブルを並行検索して結合する

    - 両クエリの完了を待ってから結果を判定する（先行完了で打ち切らない）
    - どちらか一方でも失敗すれば全体が失敗し、部分結果は返さない
    - 結果は完了順に関係なく 公開 → 非公開 の順で連結する
    """

    def __init__(
        self,
        store: IExhibitionStore,
        public_table: str,
        private_table: str,
    ):
        self._store = store
        self.public_table = public_table
        self.private_table = private_table

    async def fetch_all(self, user_id: str) -> list[RawRecord]:
        """ユーザーの全展示レコードを取得"""
        log = logger.bind(user_id=user_id)

        tables = (self.public_table, self.private_table)
        outcomes = await asyncio.gather(
            *(self._store.query(table, user_id) for table in tables),
            return_exceptions=True,
        )

        # 公開テーブルの失敗を優先して報告する
        for table, outcome in zip(tables, outcomes):
            if isinstance(outcome, StoreQueryError):
                log.error("store_query_failed", table_name=table, error=str(outcome.cause))
                raise outcome
            if isinstance(outcome, Exception):
                log.error("store_query_failed", table_name=table, error=str(outcome))
                raise StoreQueryError(table, outcome) from outcome
            if isinstance(outcome, BaseException):
                raise outcome

        public_items, private_items = outcomes
        log.info(
            "exhibitions_fetched",
            public_count=len(public_items),
            private_count=len(private_items),
        )
        return [*public_items, *private_items]
