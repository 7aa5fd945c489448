import pytest

from contactbook import create_app
from contactbook.db import ContactStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "contacts.db"


@pytest.fixture
def store(db_path):
    store = ContactStore(db_path)
    yield store
    store.close()


@pytest.fixture
def app(store, db_path):
    app = create_app({"TESTING": True, "CONTACTS_DB_PATH": str(db_path)}, store=store)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ann():
    return {
        "firstName": "Ann",
        "lastName": "Lee",
        "emailAddress": "ann@example.com",
        "notes": "<script>x</script><b>hi</b>",
    }
