"""Shared Test Fixtures"""
from __future__ import annotations

import asyncio
from typing import Any

import pytest

from src.application.ports.repositories import IExhibitionStore, StoreQueryError
from src.application.use_cases.exhibitions import ExhibitionFetcher, GetUserExhibitionsUseCase

PUBLIC_TABLE = "PublicExhibitions"
PRIVATE_TABLE = "PrivateExhibitions"


class FakeExhibitionStore(IExhibitionStore):
    """
    インメモリ Exhibition Store

    テーブルごとに返すレコード・失敗・遅延を指定できる。
    """

    def __init__(
        self,
        items: dict[str, list[dict[str, Any]]] | None = None,
        failures: dict[str, BaseException] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.items = items or {}
        self.failures = failures or {}
        self.delays = delays or {}
        self.calls: list[tuple[str, str]] = []
        self.completed: list[str] = []

    async def query(self, table_name: str, user_id: str) -> list[dict[str, Any]]:
        self.calls.append((table_name, user_id))
        await asyncio.sleep(self.delays.get(table_name, 0))
        self.completed.append(table_name)

        failure = self.failures.get(table_name)
        if failure is not None:
            if isinstance(failure, StoreQueryError):
                raise failure
            raise StoreQueryError(table_name, failure)

        return list(self.items.get(table_name, []))


@pytest.fixture
def make_use_case():
    """FakeExhibitionStore からユースケースを組み立てる"""

    def _make(store: IExhibitionStore) -> GetUserExhibitionsUseCase:
        fetcher = ExhibitionFetcher(
            store=store,
            public_table=PUBLIC_TABLE,
            private_table=PRIVATE_TABLE,
        )
        return GetUserExhibitionsUseCase(fetcher)

    return _make


@pytest.fixture
def full_record() -> dict[str, Any]:
    """全項目が埋まった生レコード"""
    return {
        "PK": {"S": "u1"},
        "ExhibitionID": {"N": "42"},
        "ExhibitionName": {"S": "Dutch Masters"},
        "ExhibitionLength": {"N": "3"},
        "ExhibitionImage": {"S": "https://images.example.org/42.jpg"},
        "ExhibitionPublic": {"N": "1"},
        "ExhibitContent": {
            "L": [
                {
                    "M": {
                        "CreationDate": {"N": "1665"},
                        "ItemClassification": {"S": "Paintings"},
                        "ItemObjectLink": {"S": "https://museum.example.org/objects/437881"},
                        "ItemDepartment": {"S": "European Paintings"},
                        "ItemTitle": {"S": "Young Woman with a Water Pitcher"},
                        "ArtistBirthplace": {"S": "Delft"},
                        "ArtistName": {"S": "Johannes Vermeer"},
                        "ItemTechnique": {"S": "Oil on canvas"},
                        "ItemCentury": {"S": "17th century"},
                        "ItemCreditline": {"S": "Marquand Collection, 1889"},
                        "ItemID": {"N": "437881"},
                    }
                }
            ]
        },
    }


@pytest.fixture
def fake_store_cls() -> type[FakeExhibitionStore]:
    """FakeExhibitionStore クラス"""
    return FakeExhibitionStore
