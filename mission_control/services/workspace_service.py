"""Read-only access to the markdown memory workspace."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from mission_control.config import settings
from mission_control.schemas.workspace import Agent, WorkspaceFile, WorkspaceFileContent

logger = logging.getLogger(__name__)

TEAM_SECTION_HEADING = "## Team Structure (Locked)"
AGENT_LINE_RE = re.compile(
    r"^\s*-\s+\*\*(?P<name>[^*]+)\*\*\s+-\s+(?P<role>.+?)\s+\((?P<model>[^()]+)\)\s*$"
)


class InvalidFileNameError(ValueError):
    """File name would escape the memory folder."""


def validate_file_name(name: str) -> str:
    """Reject names carrying path separators or parent-directory sequences."""
    if not name or ".." in name or "/" in name or "\\" in name or "\x00" in name:
        raise InvalidFileNameError(f"Invalid file name: {name!r}")
    return name


def parse_team_roster(markdown: str) -> List[Agent]:
    """Extract ``- **NAME** - ROLE (MODEL)`` bullets under the locked team heading."""
    lines = markdown.splitlines()
    try:
        start = next(i for i, line in enumerate(lines) if line.strip() == TEAM_SECTION_HEADING)
    except StopIteration:
        return []

    agents: List[Agent] = []
    for line in lines[start + 1:]:
        if line.lstrip().startswith("#"):
            break
        match = AGENT_LINE_RE.match(line)
        if not match:
            continue
        name = match.group("name").strip()
        agents.append(
            Agent(
                id=name.lower(),
                name=name,
                role=match.group("role").strip(),
                model=match.group("model").strip(),
                status="Online",
            )
        )
    return agents


class WorkspaceService:
    """Lists and reads notes from the memory folder and parses the team roster."""

    def __init__(self, root: Optional[Path] = None):
        self._root = root

    @property
    def root(self) -> Path:
        return self._root if self._root is not None else settings.WORKSPACE_ROOT

    @property
    def memory_dir(self) -> Path:
        return self.root / settings.MEMORY_DIR_NAME

    @property
    def memory_file(self) -> Path:
        return self.root / settings.MEMORY_FILE_NAME

    def list_files(self) -> List[WorkspaceFile]:
        """Markdown notes in the memory folder; raises OSError when unreadable."""
        files = []
        for path in sorted(self.memory_dir.iterdir()):
            if not path.name.endswith(".md") or not path.is_file():
                continue
            stats = path.stat()
            files.append(
                WorkspaceFile(
                    name=path.name,
                    path=path.name,
                    size=stats.st_size,
                    updated_at=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
                )
            )
        return files

    def read_file(self, name: str) -> WorkspaceFileContent:
        """Read one note; the name is validated before any filesystem call."""
        validate_file_name(name)
        content = (self.memory_dir / name).read_text(encoding="utf-8")
        return WorkspaceFileContent(name=name, content=content)

    def list_agents(self) -> List[Agent]:
        """Team roster from MEMORY.md; any failure yields an empty list."""
        try:
            markdown = self.memory_file.read_text(encoding="utf-8")
            return parse_team_roster(markdown)
        except Exception as exc:
            logger.warning("Could not read team roster from %s: %s", self.memory_file, exc)
            return []


workspace_service = WorkspaceService()
