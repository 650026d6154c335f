"""Encryption and decryption of the secrets stored inside a project.

Two things are encrypted at rest: the source connection's provider options
(stored as ``{"encrypted": "<ciphertext>"}``) and the project's API key.
Everything else in a project document is plain text.
"""

from labelkit.constants import ENCRYPTED_OPTIONS_KEY
from labelkit.logging_config import get_logger
from labelkit.models import Connection, ProjectDefinition, ProjectReference, SecurityToken
from labelkit.security import crypto

logger = get_logger(__name__)


class ProjectDecryptor:
    """Pure transforms between encrypted and cleartext projects.

    Neither direction mutates its input; both return new model instances.
    """

    def decrypt(
        self, record: ProjectReference | ProjectDefinition, token: SecurityToken
    ) -> ProjectDefinition:
        """Decrypt a project reference or a stored project.

        Raises:
            DecryptionError: If the token does not match or the data is corrupt.
        """
        connection = self.decrypt_connection(record.source_connection, token)

        if isinstance(record, ProjectReference):
            return ProjectDefinition(
                id=record.id,
                name=record.name,
                security_token_name=record.security_token_name,
                source_connection=connection,
            )

        update: dict = {"source_connection": connection}
        if record.api_key:
            update["api_key"] = crypto.decrypt(record.api_key, token.key)
        return record.model_copy(update=update, deep=True)

    def encrypt(self, project: ProjectDefinition, token: SecurityToken) -> ProjectDefinition:
        """Encrypt a cleartext project before it is written to storage."""
        connection = self.encrypt_connection(project.source_connection, token)
        update: dict = {"source_connection": connection}
        if project.api_key:
            update["api_key"] = crypto.encrypt(project.api_key, token.key)
        return project.model_copy(update=update, deep=True)

    @staticmethod
    def decrypt_connection(connection: Connection, token: SecurityToken) -> Connection:
        if not connection.is_encrypted:
            return connection
        options = crypto.decrypt_object(
            connection.provider_options[ENCRYPTED_OPTIONS_KEY], token.key
        )
        logger.debug("connection_decrypted", connection=connection.name)
        return connection.model_copy(update={"provider_options": options})

    @staticmethod
    def encrypt_connection(connection: Connection, token: SecurityToken) -> Connection:
        if connection.is_encrypted:
            return connection
        ciphertext = crypto.encrypt_object(connection.provider_options, token.key)
        return connection.model_copy(
            update={"provider_options": {ENCRYPTED_OPTIONS_KEY: ciphertext}}
        )
