"""
Test comment operations, in particular the exactly-one-of task/project rule.
"""

import pytest

from doistapi import ValidationError
from doistapi.comments import CommentFilters, CommentOptions

from conftest import BASE_URL, FakeResponse, json_body, page


def comment_payload(comment_id="c1", content="Looks good", **extra):
    payload = {"id": comment_id, "content": content, "posted_at": "2026-01-01T10:00:00Z"}
    payload.update(extra)
    return payload


class TestGetComments:

    @pytest.mark.parametrize("filters", [
        CommentFilters(),
        CommentFilters(task_id="t1", project_id="p1"),
    ])
    def test_requires_exactly_one_target(self, client, session, filters):
        with pytest.raises(ValidationError):
            client.get_comments(filters)
        assert session.calls == []

    @pytest.mark.parametrize("filters,expected", [
        (CommentFilters(task_id="t1"), {"task_id": "t1"}),
        (CommentFilters(project_id="p1", limit=5), {"project_id": "p1", "limit": "5"}),
    ])
    def test_one_target_proceeds(self, client, session, filters, expected):
        session.queue(page([comment_payload()]))

        comments, cursor = client.get_comments(filters)

        assert session.calls[0]["url"] == f"{BASE_URL}/comments"
        assert session.calls[0]["params"] == expected
        assert comments[0].content == "Looks good"
        assert cursor is None


class TestCreateComment:

    def test_requires_content(self, client, session):
        with pytest.raises(ValidationError):
            client.create_comment("", CommentOptions(task_id="t1"))
        assert session.calls == []

    @pytest.mark.parametrize("options", [
        None,
        CommentOptions(),
        CommentOptions(task_id="t1", project_id="p1"),
    ])
    def test_requires_exactly_one_target(self, client, session, options):
        with pytest.raises(ValidationError):
            client.create_comment("hello", options)
        assert session.calls == []

    def test_content_overrides_options(self, client, session):
        session.queue(FakeResponse(comment_payload("c9", "hello", item_id="t1")))

        comment = client.create_comment(
            "hello",
            CommentOptions(content="ignored", task_id="t1", uids_to_notify=["u1"]),
        )

        assert json_body(session.calls[0]) == {
            "content": "hello",
            "task_id": "t1",
            "uids_to_notify": ["u1"],
        }
        assert comment.id == "c9"
        assert comment.item_id == "t1"


class TestSingleComment:

    def test_get_comment(self, client, session):
        session.queue(FakeResponse(comment_payload("c2")))

        assert client.get_comment("c2").id == "c2"
        assert session.calls[0]["url"] == f"{BASE_URL}/comments/c2"

    def test_update_comment(self, client, session):
        session.queue(FakeResponse(comment_payload("c2", "edited")))

        comment = client.update_comment("c2", "edited")

        assert json_body(session.calls[0]) == {"content": "edited"}
        assert comment.content == "edited"

    @pytest.mark.parametrize("comment_id,content", [("", "x"), ("c1", "")])
    def test_update_validation(self, client, session, comment_id, content):
        with pytest.raises(ValidationError):
            client.update_comment(comment_id, content)
        assert session.calls == []

    def test_delete_comment(self, client, session):
        session.queue(FakeResponse(None, status_code=204))

        client.delete_comment("c2")

        assert session.calls[0]["method"] == "DELETE"

    @pytest.mark.parametrize("method", ["get_comment", "delete_comment"])
    def test_id_is_required(self, client, session, method):
        with pytest.raises(ValidationError):
            getattr(client, method)("")
        assert session.calls == []
