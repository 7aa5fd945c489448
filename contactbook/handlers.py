"""
Request-level contact operations.

Each function takes the store as its first argument so the views (and
the tests) decide which store is used. They raise the errors from
contactbook.errors; the Flask layer decides what the user sees.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Mapping

from contactbook.db import Contact, ContactStore
from contactbook.errors import InvalidRequest, NotFound, ValidationError
from contactbook.validation import sanitize_contact, validate_contact

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Fixed-width UTC text, so string order is chronological order."""
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def new_contact_id() -> str:
    return str(uuid.uuid4())


def _clean_input(data: Mapping) -> dict:
    result = validate_contact(data)
    if not result.is_valid:
        raise ValidationError(result)
    return sanitize_contact(data)


def list_contacts(store: ContactStore) -> List[Contact]:
    return store.get_all()


def get_contact(store: ContactStore, contact_id: str) -> Contact:
    contact = store.get_by_id(contact_id)
    if contact is None:
        raise NotFound(contact_id)
    return contact


def create_contact(
    store: ContactStore,
    data: Mapping,
    now: Callable[[], datetime] = utcnow,
    id_factory: Callable[[], str] = new_contact_id,
) -> Contact:
    fields = _clean_input(data)
    stamp = format_timestamp(now())
    contact = Contact(
        id=id_factory(),
        first_name=fields["firstName"],
        last_name=fields["lastName"],
        email_address=fields["emailAddress"],
        notes=fields["notes"],
        created_at=stamp,
        updated_at=stamp,
    )
    store.insert(contact)
    logger.info("Created contact %s", contact.id)
    return contact


def update_contact(
    store: ContactStore,
    contact_id: str,
    data: Mapping,
    now: Callable[[], datetime] = utcnow,
) -> Contact:
    """
    Overwrite an existing contact's fields.

    id and createdAt are carried over from the stored row. updatedAt is
    the current time, nudged one microsecond past the previous value when
    the clock hasn't moved, so every update strictly advances it.
    """
    fields = _clean_input(data)
    existing = get_contact(store, contact_id)

    moment = now()
    try:
        previous = parse_timestamp(existing.updated_at)
    except (TypeError, ValueError):
        # Legacy row with a missing or non-ISO updatedAt: nothing to advance past.
        previous = None
    if previous is not None and moment <= previous:
        moment = previous + timedelta(microseconds=1)

    contact = Contact(
        id=existing.id,
        first_name=fields["firstName"],
        last_name=fields["lastName"],
        email_address=fields["emailAddress"],
        notes=fields["notes"],
        created_at=existing.created_at,
        updated_at=format_timestamp(moment),
    )
    if not store.update(contact):
        # Deleted between the lookup and the write.
        raise NotFound(contact_id)
    logger.info("Updated contact %s", contact.id)
    return contact


def delete_contact(store: ContactStore, contact_id: str) -> None:
    if not contact_id or not str(contact_id).strip():
        raise InvalidRequest("Invalid contact ID")
    if not store.delete(contact_id):
        raise NotFound(contact_id)
    logger.info("Deleted contact %s", contact_id)
