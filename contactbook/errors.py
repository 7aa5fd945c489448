"""
Error taxonomy for the contact book.

Handlers raise these; the Flask layer turns them into responses
(form re-render, 404, 400 or 500). Nothing here is ever retried.
"""


class ContactBookError(Exception):
    """Base class for every error the application raises on purpose."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(ContactBookError):
    """Submitted fields failed validation. Never reaches the store."""

    def __init__(self, result):
        super().__init__(result.message)
        self.result = result


class NotFound(ContactBookError):
    status_code = 404

    def __init__(self, contact_id: str):
        super().__init__("Contact not found")
        self.contact_id = contact_id


class InvalidRequest(ContactBookError):
    """Structurally missing identifier, rejected before any store access."""

    status_code = 400


class StoreError(ContactBookError):
    """Underlying SQLite I/O or query failure."""

    status_code = 500
