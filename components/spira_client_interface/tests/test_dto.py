"""Unit tests for the SpiraDto base class."""

#run with "python -m pytest components/spira_client_interface/tests/test_dto.py -v"

from dataclasses import dataclass

import pytest

from spira_client_interface.dto import DtoError, SpiraDto, api_field


@dataclass(kw_only=True)
class WidgetDto(SpiraDto):
    widget_id: int | None = api_field("WidgetId")
    name: str = api_field("Name", required=True)
    tag_ids: list[int] | None = api_field("TagIds")
    project_id: int = api_field("ProjectId", required=True)


#--------------------------- tests for to_json --------------------------

def test_to_json_uses_api_names_and_skips_none():
    widget = WidgetDto(name="Gear", project_id=3)

    # Assert: only the fields that were set appear, keyed by their Spira name
    assert widget.to_json() == {"Name": "Gear", "ProjectId": 3}


def test_to_json_keeps_falsy_values_that_are_not_none():
    # 0 and [] are real values and must still be sent
    widget = WidgetDto(widget_id=0, name="", tag_ids=[], project_id=1)

    assert widget.to_json() == {"WidgetId": 0, "Name": "", "TagIds": [], "ProjectId": 1}


def test_to_json_follows_declaration_order():
    widget = WidgetDto(project_id=1, tag_ids=[1], name="Gear", widget_id=7)

    assert list(widget.to_json()) == ["WidgetId", "Name", "TagIds", "ProjectId"]


#--------------------------- tests for from_json --------------------------

def test_from_json_maps_known_keys_and_ignores_unknown():
    widget = WidgetDto.from_json({
        "WidgetId": 7,
        "Name": "Gear",
        "TagIds": [1, 2],
        "ProjectId": 3,
        "CustomProperties": [{"PropertyNumber": 1}],
    })

    assert widget == WidgetDto(widget_id=7, name="Gear", tag_ids=[1, 2], project_id=3)


def test_from_json_leaves_absent_optional_fields_none():
    widget = WidgetDto.from_json({"Name": "Gear", "ProjectId": 3})

    assert widget.widget_id is None
    assert widget.tag_ids is None


def test_from_json_accepts_explicit_null_for_optional_fields():
    widget = WidgetDto.from_json({"WidgetId": None, "Name": "Gear", "ProjectId": 3})

    assert widget.widget_id is None


def test_from_json_missing_required_field_raises():
    with pytest.raises(DtoError) as exc_info:
        WidgetDto.from_json({"WidgetId": 7})

    # both missing keys are named in the message
    assert "Name" in str(exc_info.value)
    assert "ProjectId" in str(exc_info.value)


def test_from_json_null_required_field_raises():
    # Setup: the key is present but null, which must not yield a DTO that later drops it
    with pytest.raises(DtoError) as exc_info:
        WidgetDto.from_json({"Name": None, "ProjectId": 1})

    assert "Name" in str(exc_info.value)
    assert "ProjectId" not in str(exc_info.value)


def test_from_json_rejects_non_object():
    with pytest.raises(DtoError):
        WidgetDto.from_json(["not", "an", "object"])


def test_dto_error_is_a_value_error():
    assert issubclass(DtoError, ValueError)


#--------------------------- tests for from_json_list --------------------------

def test_from_json_list_decodes_every_item():
    widgets = WidgetDto.from_json_list([
        {"Name": "Gear", "ProjectId": 1},
        {"Name": "Cog", "ProjectId": 1},
    ])

    assert [w.name for w in widgets] == ["Gear", "Cog"]


def test_from_json_list_empty_array():
    assert WidgetDto.from_json_list([]) == []


def test_from_json_list_rejects_object():
    with pytest.raises(DtoError):
        WidgetDto.from_json_list({"Name": "Gear", "ProjectId": 1})


#--------------------------- tests for set_fields --------------------------

def test_set_fields_returns_attribute_names():
    widget = WidgetDto(widget_id=7, name="Gear", project_id=3)

    assert widget.set_fields() == {"widget_id": 7, "name": "Gear", "project_id": 3}
