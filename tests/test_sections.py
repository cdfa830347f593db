"""
Test section operations against a fake session.
"""

import pytest

from doistapi import ValidationError
from doistapi.sections import SectionFilters, SectionOptions

from conftest import BASE_URL, FakeResponse, json_body, page


def section_payload(section_id="s1", name="Section", project_id="p1"):
    return {"id": section_id, "name": name, "project_id": project_id, "section_order": 1}


class TestSections:

    @pytest.mark.parametrize("name,project_id", [("", "p1"), ("Next", ""), ("", "")])
    def test_create_requires_name_and_project(self, client, session, name, project_id):
        with pytest.raises(ValidationError):
            client.create_section(name, project_id)
        assert session.calls == []

    def test_create_overrides_options(self, client, session):
        session.queue(FakeResponse(section_payload("s2", "Next", "p1")))

        section = client.create_section(
            "Next", "p1", SectionOptions(name="x", project_id="y", order=3)
        )

        assert json_body(session.calls[0]) == {"name": "Next", "project_id": "p1", "order": 3}
        assert section.id == "s2"

    def test_get_sections_for_project(self, client, session):
        session.queue(page([section_payload()]))

        sections, cursor = client.get_sections(SectionFilters(project_id="p1"))

        assert session.calls[0]["params"] == {"project_id": "p1"}
        assert sections[0].section_order == 1
        assert cursor is None

    def test_get_section(self, client, session):
        session.queue(FakeResponse(section_payload("s5")))

        assert client.get_section("s5").id == "s5"
        assert session.calls[0]["url"] == f"{BASE_URL}/sections/s5"

    def test_update_section_sends_only_name(self, client, session):
        session.queue(FakeResponse(section_payload("s5", "Renamed")))

        section = client.update_section("s5", "Renamed")

        assert json_body(session.calls[0]) == {"name": "Renamed"}
        assert section.name == "Renamed"

    @pytest.mark.parametrize("section_id,name", [("", "x"), ("s1", "")])
    def test_update_validation(self, client, session, section_id, name):
        with pytest.raises(ValidationError):
            client.update_section(section_id, name)
        assert session.calls == []

    def test_delete_section(self, client, session):
        session.queue(FakeResponse(None, status_code=204))

        client.delete_section("s1")

        assert session.calls[0]["method"] == "DELETE"
        assert session.calls[0]["url"] == f"{BASE_URL}/sections/s1"
