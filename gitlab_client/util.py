from typing import Union
from urllib.parse import quote

from .exception import ProjectReferenceException


class ProjectID(int):
    """Numeric project identifier"""

    @property
    def path_segment(self) -> str:
        return str(int(self))


class ProjectPath(str):
    """Project identified by its "namespace/name" path"""

    @property
    def path_segment(self) -> str:
        return quote(str(self), safe="")


ProjectRef = Union[ProjectID, ProjectPath]


def as_project_ref(pid: Union[int, str]) -> ProjectRef:
    """Convert a user supplied project reference to a ProjectID or a ProjectPath

    :param pid: Project ID (int) or "namespace/name" path (str)
    :raises ProjectReferenceException: on empty values and unsupported types
    """
    if isinstance(pid, ProjectID):
        return pid
    # bool is an int subclass, True is not a project
    if isinstance(pid, bool):
        raise ProjectReferenceException(f"invalid project reference type: {pid!r}")
    if isinstance(pid, int):
        return ProjectID(pid)
    if isinstance(pid, str):
        if not pid.strip():
            raise ProjectReferenceException("empty project reference")
        if isinstance(pid, ProjectPath):
            return pid
        return ProjectPath(pid)
    raise ProjectReferenceException(
        f"invalid project reference type: {type(pid).__name__}"
    )


def resolve_project_ref(pid: Union[int, str]) -> str:
    return as_project_ref(pid).path_segment
