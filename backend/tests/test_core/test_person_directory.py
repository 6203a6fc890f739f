"""
Unit tests for the person directory.

Tests cover creation, rename and lookup, including exact-match name
semantics and audit entries.
"""
import pytest
from datetime import date
from sqlalchemy import select

from app.core.duty_assignment import DutyAssignmentService
from app.core.errors import ConflictError, InternalError, NotFoundError, ValidationError
from app.core.person_directory import PersonDirectory
from app.db.crud import person_crud
from app.models.audit_log import AuditLog


class TestCreate:
    """Tests for person creation."""

    def test_create_person(self, db_session):
        person = PersonDirectory(db_session).create("Grace")

        assert person.id is not None
        assert person.name == "Grace"
        assert person_crud.count(db_session) == 1

    def test_ids_are_unique(self, db_session):
        directory = PersonDirectory(db_session)

        ids = {directory.create(name).id for name in ["Grace", "Alan", "Ada"]}

        assert len(ids) == 3

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, db_session, name):
        with pytest.raises(ValidationError):
            PersonDirectory(db_session).create(name)

        assert person_crud.count(db_session) == 0

    def test_duplicate_name_rejected(self, db_session, grace):
        with pytest.raises(ConflictError):
            PersonDirectory(db_session).create("Grace")

        assert person_crud.count(db_session) == 1

    def test_names_are_case_sensitive(self, db_session, grace):
        person = PersonDirectory(db_session).create("grace")

        assert person.id != grace.id

    def test_create_is_audited(self, db_session):
        person = PersonDirectory(db_session).create("Grace")

        entry = db_session.scalars(
            select(AuditLog).where(AuditLog.action == "CREATE_PERSON")
        ).one()
        assert entry.entity_id == str(person.id)
        assert entry.details == "Created person: Grace"

    def test_unexpected_error_is_internal(self, db_session, monkeypatch):
        def broken_add(db, obj):
            raise RuntimeError("serializer exploded")

        monkeypatch.setattr(person_crud, "add", broken_add)
        with pytest.raises(InternalError):
            PersonDirectory(db_session).create("Grace")
        monkeypatch.undo()

        db_session.commit()
        assert person_crud.count(db_session) == 0
        entry = db_session.scalars(
            select(AuditLog).where(AuditLog.action == "CREATE_PERSON")
        ).one()
        assert entry.level == "Error"
        assert "RuntimeError" in entry.details


class TestRename:
    """Tests for renaming a person."""

    def test_rename_keeps_id(self, db_session, grace):
        grace_id = grace.id

        person = PersonDirectory(db_session).rename("Grace", "Grace Hopper")

        assert person.id == grace_id
        assert person.name == "Grace Hopper"
        assert person_crud.get_by_name(db_session, "Grace") is None

    def test_rename_unknown_person(self, db_session):
        with pytest.raises(NotFoundError):
            PersonDirectory(db_session).rename("Nobody", "Somebody")

    def test_rename_to_blank(self, db_session, grace):
        with pytest.raises(ValidationError):
            PersonDirectory(db_session).rename("Grace", " ")

        assert person_crud.get_by_name(db_session, "Grace") is not None

    def test_rename_to_taken_name(self, db_session, grace):
        directory = PersonDirectory(db_session)
        directory.create("Alan")

        with pytest.raises(ConflictError):
            directory.rename("Grace", "Alan")

        assert person_crud.get_by_name(db_session, "Grace") is not None

    def test_rename_to_same_name(self, db_session, grace):
        person = PersonDirectory(db_session).rename("Grace", "Grace")

        assert person.id == grace.id
        assert person.name == "Grace"

    def test_unexpected_error_keeps_old_name(self, db_session, grace, monkeypatch):
        real_get_by_name = person_crud.get_by_name

        def flaky_get_by_name(db, name, for_update=False):
            if name == "Grace Hopper":
                raise RuntimeError("lookup exploded")
            return real_get_by_name(db, name, for_update=for_update)

        monkeypatch.setattr(person_crud, "get_by_name", flaky_get_by_name)
        with pytest.raises(InternalError):
            PersonDirectory(db_session).rename("Grace", "Grace Hopper")
        monkeypatch.undo()

        db_session.commit()
        assert person_crud.get_by_name(db_session, "Grace") is not None
        assert person_crud.get_by_name(db_session, "Grace Hopper") is None
        entry = db_session.scalars(
            select(AuditLog).where(AuditLog.action == "UPDATE_PERSON")
        ).one()
        assert entry.level == "Error"

    def test_duties_follow_renamed_person(self, db_session, grace):
        DutyAssignmentService(db_session).assign_duty(
            "Grace", "Major", "Commander", date(2024, 1, 10)
        )

        PersonDirectory(db_session).rename("Grace", "Grace Hopper")

        with pytest.raises(ConflictError):
            DutyAssignmentService(db_session).assign_duty(
                "Grace Hopper", "Major", "Commander", date(2024, 1, 10)
            )


class TestLookup:
    """Tests for lookups, which never raise for absence."""

    def test_find_existing(self, db_session, grace):
        assert PersonDirectory(db_session).find_by_name("Grace").id == grace.id

    def test_find_missing(self, db_session):
        assert PersonDirectory(db_session).find_by_name("Nobody") is None
        assert PersonDirectory(db_session).find_by_name(None) is None

    def test_list_people_with_details(self, db_session, grace):
        directory = PersonDirectory(db_session)
        directory.create("Alan")
        DutyAssignmentService(db_session).assign_duty(
            "Grace", "Major", "Commander", date(2024, 1, 10)
        )

        rows = directory.list_people()

        assert [person.name for person, _ in rows] == ["Alan", "Grace"]
        assert rows[0][1] is None
        assert rows[1][1].current_duty_title == "Commander"
