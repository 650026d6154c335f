"""Project resolution: turn a recent-project reference into a usable project.

Pipeline for one attempt:

    token lookup -> decrypt reference -> read "<name>.json"
        -> (not found) read "<name>.fottproj"
        -> parse -> reconcile connection -> decrypt secrets

Only a "resource not found" on the first read triggers the legacy-name
read. A second "not found" is the handled ``ProjectNotFound`` outcome.
Every other failure is raised unchanged; nothing is retried.
"""

import json
from typing import Any

from pydantic import ValidationError

from labelkit.constants import LEGACY_PROJECT_FILE_EXTENSION, PROJECT_FILE_EXTENSION
from labelkit.errors import AppError, ErrorCode, ProjectParseError, SecurityTokenNotFoundError
from labelkit.logging_config import bound_context, get_logger
from labelkit.models import ProjectDefinition, ProjectReference, SecurityToken
from labelkit.security import ProjectDecryptor, SecurityTokenStore
from labelkit.storage import StorageProvider, StorageProviderFactory

from .outcomes import ProjectNotFound, Resolved, ResolutionOutcome

logger = get_logger(__name__)


def _is_not_found(error: AppError) -> bool:
    return error.error_code is ErrorCode.RESOURCE_NOT_FOUND


class ProjectResolver:
    """Resolves project references against their storage backend.

    The token store is shared and read-only; every call builds its own
    storage provider, so concurrent resolutions do not interact.
    """

    def __init__(
        self,
        token_store: SecurityTokenStore,
        decryptor: ProjectDecryptor | None = None,
        storage_factory: StorageProviderFactory | None = None,
    ):
        self.token_store = token_store
        self.decryptor = decryptor or ProjectDecryptor()
        self.storage_factory = storage_factory or StorageProviderFactory()

    async def resolve(self, reference: ProjectReference) -> ResolutionOutcome:
        """Fetch, decrypt and reconcile the latest stored version of a project.

        Returns:
            ``Resolved`` with the project, or ``ProjectNotFound`` when neither
            file name exists in the project's storage.

        Raises:
            SecurityTokenNotFoundError: The reference names an unknown token.
                No storage access is attempted.
            DecryptionError: The token does not decrypt the project secrets.
            ProjectParseError: The stored document is not a valid project.
            StorageError: Any storage failure other than "not found".
        """
        with bound_context(project_id=reference.id):
            logger.info("project_resolution_started", project_name=reference.name)

            try:
                token = self.token_store.resolve(reference.security_token_name)
            except SecurityTokenNotFoundError:
                logger.warning(
                    "project_security_token_missing",
                    security_token=reference.security_token_name,
                )
                raise

            decrypted = self.decryptor.decrypt(reference, token)
            storage = self.storage_factory.create_from_connection(decrypted.source_connection)

            primary_name = f"{decrypted.name}{PROJECT_FILE_EXTENSION}"
            legacy_name = f"{decrypted.name}{LEGACY_PROJECT_FILE_EXTENSION}"

            try:
                text = await storage.read_text(primary_name)
                file_name = primary_name
            except AppError as e:
                if not _is_not_found(e):
                    raise
                logger.info(
                    "project_primary_not_found",
                    file_name=primary_name,
                    fallback=legacy_name,
                )
                outcome = await self._read_legacy(storage, reference, primary_name, legacy_name)
                if isinstance(outcome, ProjectNotFound):
                    return outcome
                text = outcome
                file_name = legacy_name

            project = self._reconcile(self._parse(text, file_name), reference, token, file_name)

            logger.info(
                "project_resolved",
                project_name=project.name,
                file_name=file_name,
                connection=project.source_connection.name,
            )
            return Resolved(
                project=project,
                file_name=file_name,
                used_legacy_name=file_name == legacy_name,
            )

    async def _read_legacy(
        self,
        storage: StorageProvider,
        reference: ProjectReference,
        primary_name: str,
        legacy_name: str,
    ) -> str | ProjectNotFound:
        try:
            return await storage.read_text(legacy_name)
        except AppError as e:
            if not _is_not_found(e):
                raise
            logger.warning(
                "project_not_found",
                file_name=primary_name,
                legacy_file_name=legacy_name,
                container=reference.source_connection.name,
            )
            return ProjectNotFound(
                project_name=reference.name,
                file_name=primary_name,
                container=reference.source_connection.name,
            )

    @staticmethod
    def _parse(text: str, file_name: str) -> dict[str, Any]:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProjectParseError(f"{file_name} is not valid JSON: {e}") from e
        if not isinstance(document, dict):
            raise ProjectParseError(f"{file_name} does not hold a JSON object")
        return document

    def _reconcile(
        self,
        stored: dict[str, Any],
        reference: ProjectReference,
        token: SecurityToken,
        file_name: str,
    ) -> ProjectDefinition:
        # The caller's connection replaces whatever the stored document carries
        stored.pop("source_connection", None)
        merged = {
            **stored,
            "sourceConnection": reference.source_connection.model_dump(by_alias=True),
        }
        try:
            project = ProjectDefinition.model_validate(merged)
        except ValidationError as e:
            raise ProjectParseError(f"{file_name} is not a valid project document: {e}") from e
        return self.decryptor.decrypt(project, token)
