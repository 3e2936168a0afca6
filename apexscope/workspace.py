"""Resolve `${workspaceFolder}` tokens in configured paths."""

import logging
import os
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_ROOT_FOLDER_RE = re.compile(r"\$\{workspaceFolder\}(.*)")
_NAMED_FOLDER_RE = re.compile(r"\$\{workspaceFolder:(.*)\}(.*)")


@dataclass
class WorkspaceFolder:
    name: str
    path: str


def _join(root: str, rest: str) -> str:
    parts = [p for p in re.split(r"[\\/]", rest) if p]
    return os.path.abspath(os.path.join(root, *parts))


def resolve_workspace_folder(path: str, folders: list[WorkspaceFolder]) -> str:
    """Expand a workspace token at the start of `path`.

    `${workspaceFolder}` refers to the first folder, `${workspaceFolder:name}`
    to the folder called `name`. Paths without a token, or whose token
    cannot be resolved, are returned unchanged.
    """
    root_match = _ROOT_FOLDER_RE.search(path)
    if root_match:
        if not folders:
            logger.warning("Workspace variable in path '%s' could not be resolved.", path)
            return path
        return _join(folders[0].path, root_match.group(1))

    named_match = _NAMED_FOLDER_RE.search(path)
    if named_match:
        name, rest = named_match.groups()
        for folder in folders:
            if folder.name == name:
                return _join(folder.path, rest)
        logger.warning("Workspace variable in path '%s' could not be resolved.", path)

    return path
