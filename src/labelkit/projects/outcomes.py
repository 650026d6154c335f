from dataclasses import dataclass
from typing import ClassVar

from labelkit.errors import ResolutionKind
from labelkit.models import ProjectDefinition


@dataclass(frozen=True)
class Resolved:
    """Resolution succeeded; ``project`` is decrypted and reconciled."""

    project: ProjectDefinition
    file_name: str
    used_legacy_name: bool = False

    kind: ClassVar[ResolutionKind] = ResolutionKind.SUCCESS


@dataclass(frozen=True)
class ProjectNotFound:
    """Neither the current nor the legacy project file exists.

    This is a handled outcome: the caller reports it and stays where it is.
    """

    project_name: str
    file_name: str
    container: str

    kind: ClassVar[ResolutionKind] = ResolutionKind.NOT_FOUND

    @property
    def message(self) -> str:
        return (
            f"Project file {self.file_name} was not found in {self.container}. "
            "It may have been moved, renamed or deleted."
        )


ResolutionOutcome = Resolved | ProjectNotFound
