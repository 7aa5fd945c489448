"""
Tests for the contact handlers, with a real store and with a mocked one.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from contactbook import handlers
from contactbook.db import Contact, ContactStore
from contactbook.errors import InvalidRequest, NotFound, StoreError, ValidationError

FIXED = datetime(2026, 10, 17, 9, 30, 0, tzinfo=timezone.utc)


def _clock(*moments):
    ticks = iter(moments)
    return lambda: next(ticks)


class TestCreateAndFetch:
    """Test create_contact() and get_contact()."""

    def test_round_trip_returns_sanitized_values(self, store, ann):
        created = handlers.create_contact(store, ann)
        fetched = handlers.get_contact(store, created.id)

        assert fetched == created
        assert fetched.first_name == "Ann"
        assert fetched.last_name == "Lee"
        assert fetched.email_address == "ann@example.com"
        assert fetched.notes == "<b>hi</b>"

    def test_created_contact_is_listed(self, store, ann):
        created = handlers.create_contact(store, ann)

        assert [c.id for c in handlers.list_contacts(store)] == [created.id]

    def test_timestamps_set_to_now(self, store, ann):
        created = handlers.create_contact(store, ann, now=_clock(FIXED))

        assert created.created_at == "2026-10-17T09:30:00.000000Z"
        assert created.updated_at == created.created_at

    def test_ids_are_unique_across_rapid_creates(self, store, ann):
        ids = {handlers.create_contact(store, ann, now=_clock(FIXED)).id for _ in range(50)}

        assert len(ids) == 50

    def test_caller_supplied_id_is_ignored(self, store, ann):
        created = handlers.create_contact(store, dict(ann, id="mine"))

        assert created.id != "mine"

    def test_invalid_input_creates_nothing(self, store, ann):
        with pytest.raises(ValidationError) as excinfo:
            handlers.create_contact(store, dict(ann, firstName="Ann3"))

        assert "First name should contain only letters." in excinfo.value.message
        assert handlers.list_contacts(store) == []

    def test_validation_failure_never_touches_store(self, ann):
        store = Mock(spec=ContactStore)

        with pytest.raises(ValidationError):
            handlers.create_contact(store, dict(ann, emailAddress="Ann@example.com"))
        assert store.method_calls == []

    def test_get_missing_raises_not_found(self, store):
        with pytest.raises(NotFound):
            handlers.get_contact(store, "missing")

    def test_store_failure_propagates(self, ann):
        store = Mock(spec=ContactStore)
        store.insert.side_effect = StoreError("disk I/O error")

        with pytest.raises(StoreError):
            handlers.create_contact(store, ann)


class TestUpdate:
    """Test update_contact()."""

    def test_preserves_id_and_created_at(self, store, ann):
        created = handlers.create_contact(store, ann, now=_clock(FIXED))
        later = FIXED + timedelta(minutes=5)

        updated = handlers.update_contact(
            store,
            created.id,
            {"firstName": "Anna", "lastName": "Lee", "emailAddress": "", "notes": "<i>moved</i>"},
            now=_clock(later),
        )

        stored = handlers.get_contact(store, created.id)
        assert stored == updated
        assert stored.id == created.id
        assert stored.created_at == created.created_at
        assert stored.updated_at == "2026-10-17T09:35:00.000000Z"
        assert stored.first_name == "Anna"
        assert stored.email_address == ""
        assert stored.notes == "<i>moved</i>"

    def test_updated_at_strictly_advances_when_clock_stands_still(self, store, ann):
        created = handlers.create_contact(store, ann, now=_clock(FIXED))

        first = handlers.update_contact(store, created.id, ann, now=_clock(FIXED))
        second = handlers.update_contact(store, created.id, ann, now=_clock(FIXED - timedelta(seconds=1)))

        assert created.updated_at < first.updated_at < second.updated_at
        assert first.created_at == created.created_at

    def test_missing_id_raises_not_found(self, store, ann):
        with pytest.raises(NotFound):
            handlers.update_contact(store, "missing", ann)

    def test_validation_runs_before_lookup(self, ann):
        store = Mock(spec=ContactStore)

        with pytest.raises(ValidationError):
            handlers.update_contact(store, "missing", dict(ann, lastName=""))
        store.get_by_id.assert_not_called()

    def test_row_vanishing_before_write_raises_not_found(self, store, ann):
        created = handlers.create_contact(store, ann)
        racing = Mock(wraps=store)
        racing.update.return_value = False

        with pytest.raises(NotFound):
            handlers.update_contact(racing, created.id, ann)

    @pytest.mark.parametrize("stored_updated_at", [None, "", "last tuesday"])
    def test_unparseable_stored_updated_at_uses_now(self, store, ann, stored_updated_at):
        store.insert(
            Contact(
                id="legacy",
                first_name="Old",
                last_name="Row",
                email_address="",
                notes="",
                created_at="2024-01-01T00:00:00.000Z",
                updated_at=stored_updated_at,
            )
        )

        updated = handlers.update_contact(store, "legacy", ann, now=_clock(FIXED))

        assert updated.updated_at == "2026-10-17T09:30:00.000000Z"
        assert handlers.get_contact(store, "legacy").updated_at == updated.updated_at
        assert updated.created_at == "2024-01-01T00:00:00.000Z"


class TestDelete:
    """Test delete_contact()."""

    def test_delete_then_fetch_raises_not_found(self, store, ann):
        created = handlers.create_contact(store, ann)

        handlers.delete_contact(store, created.id)

        with pytest.raises(NotFound):
            handlers.get_contact(store, created.id)

    def test_delete_missing_raises_not_found(self, store):
        with pytest.raises(NotFound):
            handlers.delete_contact(store, "missing")

    @pytest.mark.parametrize("contact_id", ["", "   ", None])
    def test_blank_id_rejected_without_store_call(self, contact_id):
        store = Mock(spec=ContactStore)

        with pytest.raises(InvalidRequest):
            handlers.delete_contact(store, contact_id)
        assert store.method_calls == []


class TestTimestamps:
    """Test timestamp formatting helpers."""

    def test_format_is_fixed_width_utc(self):
        local = FIXED.astimezone(timezone(timedelta(hours=5)))

        assert handlers.format_timestamp(local) == "2026-10-17T09:30:00.000000Z"

    def test_parse_accepts_millisecond_precision(self):
        assert handlers.parse_timestamp("2026-10-17T09:30:00.000Z") == FIXED

    def test_string_order_is_chronological(self):
        earlier = handlers.format_timestamp(FIXED)
        later = handlers.format_timestamp(FIXED + timedelta(microseconds=1))

        assert earlier < later
