import json

import pytest

from labelkit.errors import ResourceNotFoundError
from labelkit.models import Connection, ProjectReference, SecurityToken
from labelkit.security import ProjectDecryptor
from labelkit.security.crypto import generate_key


class InMemoryStorage:
    """Storage provider backed by a dict, recording every read."""

    def __init__(self, files: dict[str, str] | None = None, errors: dict | None = None):
        self.files = dict(files or {})
        self.errors = dict(errors or {})
        self.reads: list[str] = []

    async def read_text(self, path: str) -> str:
        self.reads.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path not in self.files:
            raise ResourceNotFoundError(f"{path} not found", path=path)
        return self.files[path]


class StubStorageFactory:
    """Returns the same storage for every connection and records connections."""

    def __init__(self, storage: InMemoryStorage):
        self.storage = storage
        self.connections: list[Connection] = []

    def create_from_connection(self, connection: Connection) -> InMemoryStorage:
        self.connections.append(connection)
        return self.storage


@pytest.fixture
def token():
    return SecurityToken(name="t1", key=generate_key())


@pytest.fixture
def live_connection():
    return Connection(
        id="conn-live",
        name="C_live",
        provider_type="azureBlobStorage",
        provider_options={"sasUrl": "https://acct.blob.core.windows.net/projects?sig=live"},
    )


@pytest.fixture
def stale_connection():
    return Connection(
        id="conn-old",
        name="C_stale",
        provider_type="azureBlobStorage",
        provider_options={"sasUrl": "https://old.blob.core.windows.net/projects?sig=old"},
    )


@pytest.fixture
def reference(live_connection):
    return ProjectReference(
        id="proj-1",
        name="Invoice",
        security_token_name="t1",
        source_connection=live_connection,
    )


@pytest.fixture
def encrypted_reference(reference, token):
    connection = ProjectDecryptor.encrypt_connection(reference.source_connection, token)
    return reference.model_copy(update={"source_connection": connection})


def make_project_document(name: str = "Invoice", connection: Connection | None = None, **extra):
    """Stored project JSON as the labeling tool writes it."""
    stored_connection = {
        "id": "conn-old",
        "name": "C_stale",
        "providerType": "azureBlobStorage",
        "providerOptions": {"sasUrl": "https://old.blob.core.windows.net/projects?sig=old"},
    }
    if connection is not None:
        stored_connection = connection.model_dump(by_alias=True)
    document = {
        "id": "proj-1",
        "name": name,
        "version": "2.1.0",
        "securityToken": "t1",
        "sourceConnection": stored_connection,
        "tags": [{"name": "total", "color": "#ff0000", "type": "string"}],
        "lastVisitedAssetId": "asset-9",
    }
    document.update(extra)
    return json.dumps(document)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def storage_factory(storage):
    return StubStorageFactory(storage)


@pytest.fixture
def project_document():
    return make_project_document
