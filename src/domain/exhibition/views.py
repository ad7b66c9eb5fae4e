"""Exhibition Read Views"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class ContentItemView:
    """
    展示コンテンツ（作品）の公開表現

    すべての項目は欠損し得るため Optional。
    数値項目はストアが返した数値文字列のまま保持する。
    """

    creation_date: str | None = None
    item_classification: str | None = None
    item_object_link: str | None = None
    item_department: str | None = None
    item_title: str | None = None
    artist_birthplace: str | None = None
    artist_name: str | None = None
    item_technique: str | None = None
    item_century: str | None = None
    item_creditline: str | None = None
    item_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """ワイヤ形式の辞書に変換"""
        return {
            "CreationDate": self.creation_date,
            "ItemClassification": self.item_classification,
            "ItemObjectLink": self.item_object_link,
            "ItemDepartment": self.item_department,
            "ItemTitle": self.item_title,
            "ArtistBirthplace": self.artist_birthplace,
            "ArtistName": self.artist_name,
            "ItemTechnique": self.item_technique,
            "ItemCentury": self.item_century,
            "ItemCreditline": self.item_creditline,
            "ItemID": self.item_id,
        }


@dataclass(frozen=True)
class VisibilityFlag:
    """
    公開フラグ（数値または文字列のタグ付き共用体）

    ストア上で数値 (N) と文字列 (S) が混在しているため、
    どちらの表現も変換せずそのまま保持する。
    """

    kind: Literal["N", "S"]
    value: str


@dataclass(frozen=True)
class ExhibitionView:
    """
    展示の公開表現

    content が None の場合は「コンテンツ情報なし」を表し、
    空リスト（コンテンツ 0 件）とは区別する。
    """

    exhibition_id: str | None = None
    exhibition_name: str | None = None
    exhibition_length: str | None = None
    exhibition_image: str | None = None
    exhibition_public: VisibilityFlag | None = None
    content: tuple[ContentItemView, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """ワイヤ形式の辞書に変換"""
        return {
            "ExhibitionID": self.exhibition_id,
            "ExhibitionName": self.exhibition_name,
            "ExhibitionLength": self.exhibition_length,
            "ExhibitionImage": self.exhibition_image,
            "ExhibitionPublic": (
                self.exhibition_public.value if self.exhibition_public else None
            ),
            "ExhibitContent": (
                [item.to_dict() for item in self.content]
                if self.content is not None
                else None
            ),
        }
