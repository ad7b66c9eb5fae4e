"""Exhibition Record Projector

DynamoDB の型付き属性値形式の生レコードを公開ワイヤ形式へ投影する。
欠損・型不一致の項目はエラーにせず None として出力する（全域関数）。
"""
from __future__ import annotations

from typing import Any

from src.application.ports.repositories import RawRecord
from src.domain.exhibition import ContentItemView, ExhibitionView, VisibilityFlag


def project(record: RawRecord) -> ExhibitionView:
    """生レコードを ExhibitionView に投影"""
    return ExhibitionView(
        exhibition_id=_number(record, "ExhibitionID"),
        exhibition_name=_string(record, "ExhibitionName"),
        exhibition_length=_number(record, "ExhibitionLength"),
        exhibition_image=_string(record, "ExhibitionImage"),
        exhibition_public=_visibility(record, "ExhibitionPublic"),
        content=_content_list(record, "ExhibitContent"),
    )


def project_content(sub_record: Any) -> ContentItemView:
    """
    ExhibitContent の要素 ({"M": {...}}) を ContentItemView に投影

    マップ以外の要素は全項目 None のアイテムになる。
    """
    fields = _tagged(sub_record, "M")
    if not isinstance(fields, dict):
        fields = {}

    return ContentItemView(
        creation_date=_number(fields, "CreationDate"),
        item_classification=_string(fields, "ItemClassification"),
        item_object_link=_string(fields, "ItemObjectLink"),
        item_department=_string(fields, "ItemDepartment"),
        item_title=_string(fields, "ItemTitle"),
        artist_birthplace=_string(fields, "ArtistBirthplace"),
        artist_name=_string(fields, "ArtistName"),
        item_technique=_string(fields, "ItemTechnique"),
        item_century=_string(fields, "ItemCentury"),
        item_creditline=_string(fields, "ItemCreditline"),
        item_id=_number(fields, "ItemID"),
    )


def _tagged(value: Any, tag: str) -> Any:
    """属性値から指定タグの値を取り出す（なければ None）"""
    if not isinstance(value, dict):
        return None
    return value.get(tag)


def _string(fields: dict[str, Any], name: str) -> str | None:
    return _tagged(fields.get(name), "S")


def _number(fields: dict[str, Any], name: str) -> str | None:
    # 数値文字列は検証・変換せずそのまま返す
    return _tagged(fields.get(name), "N")


def _visibility(fields: dict[str, Any], name: str) -> VisibilityFlag | None:
    attribute = fields.get(name)

    number = _tagged(attribute, "N")
    if number is not None:
        return VisibilityFlag(kind="N", value=number)

    text = _tagged(attribute, "S")
    if text is not None:
        return VisibilityFlag(kind="S", value=text)

    return None


def _content_list(
    fields: dict[str, Any], name: str
) -> tuple[ContentItemView, ...] | None:
    items = _tagged(fields.get(name), "L")
    if not isinstance(items, list):
        return None
    return tuple(project_content(item) for item in items)
