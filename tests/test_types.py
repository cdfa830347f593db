"""
Test field presence policies and entity decoding.
"""

from dataclasses import dataclass, field

import pytest

from doistapi import UNSET, DecodeError
from doistapi.comments import CommentOptions
from doistapi.models import Reminder, UserPlanLimits
from doistapi.projects import ProjectOptions
from doistapi.tasks import Task, TaskOptions
from doistapi.types import ALWAYS, OMIT_EMPTY, body_field, from_payload, is_empty, to_payload


class TestUnset:

    def test_unset_is_falsy_singleton(self):
        from doistapi.types import Unset

        assert not UNSET
        assert Unset() is UNSET
        assert repr(UNSET) == "UNSET"
        assert UNSET is not None


class TestToPayload:
    """Test the three presence policies."""

    def test_unset_fields_are_omitted(self):
        assert to_payload(TaskOptions()) == {}

    def test_none_is_sent_as_null_for_nullable_fields(self):
        payload = to_payload(ProjectOptions(name="Home", parent_id=None))
        assert payload == {"name": "Home", "parent_id": None}

    def test_empty_list_is_sent_to_clear_labels(self):
        assert to_payload(TaskOptions(labels=[])) == {"labels": []}

    def test_always_field_is_emitted_even_when_empty(self):
        payload = to_payload(CommentOptions(task_id="1"))
        assert payload == {"content": "", "task_id": "1"}

    def test_omit_empty_drops_zero_values(self):
        @dataclass
        class Sample:
            a: int = body_field(0, policy=OMIT_EMPTY)
            b: bool = body_field(False, policy=OMIT_EMPTY)
            c: str = body_field("", policy=OMIT_EMPTY)
            d: str = body_field("", policy=ALWAYS)
            e: list = field(default_factory=list)

        assert to_payload(Sample()) == {"d": ""}
        assert to_payload(Sample(a=1, b=True, c="x", e=[1])) == {
            "a": 1, "b": True, "c": "x", "d": "", "e": [1],
        }

    def test_custom_json_key(self):
        @dataclass
        class Sample:
            due: str = body_field(key="due_string")

        assert to_payload(Sample(due="tomorrow")) == {"due_string": "tomorrow"}

    def test_mapping_drops_unset(self):
        assert to_payload({"a": 1, "b": UNSET, "c": None}) == {"a": 1, "c": None}

    def test_non_dataclass_is_rejected(self):
        with pytest.raises(TypeError):
            to_payload(42)

    def test_is_empty(self):
        assert is_empty(UNSET)
        assert is_empty(None)
        assert is_empty(0)
        assert is_empty("")
        assert not is_empty("0")
        assert not is_empty(True)


class TestFromPayload:
    """Test decoding JSON objects into entities."""

    def test_unknown_keys_are_ignored(self):
        task = from_payload(Task, {"id": "1", "content": "x", "brand_new_key": 1})
        assert task.id == "1"
        assert not hasattr(task, "brand_new_key")

    def test_missing_optional_keys_use_defaults(self):
        task = from_payload(Task, {"id": "1", "content": "x"})
        assert task.labels == []
        assert task.parent_id is None
        assert task.priority == 1

    def test_missing_required_key(self):
        with pytest.raises(DecodeError):
            from_payload(Task, {"id": "1"})

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            from_payload(Task, ["id", "1"])

    def test_nested_model(self):
        reminder = from_payload(Reminder, {
            "id": "r1",
            "item_id": "1",
            "type": "absolute",
            "due": {"date": "2026-01-01T10:00:00", "is_recurring": False},
        })
        assert reminder.due.date == "2026-01-01T10:00:00"
        assert reminder.due.timezone is None

    def test_nested_null_stays_none(self):
        limits = from_payload(UserPlanLimits, {"current": {"plan_name": "pro"}, "next": None})
        assert limits.current.plan_name == "pro"
        assert limits.next is None
