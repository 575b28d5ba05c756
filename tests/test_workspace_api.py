"""Tests for the workspace file browser and agent roster."""
from pathlib import Path

import pytest

from mission_control.services.workspace_service import (
    InvalidFileNameError,
    parse_team_roster,
    validate_file_name,
)

ROSTER_MD = """# Memory

Some preamble.

## Team Structure (Locked)

- **VIPIN** - Investigator (claude-opus)
- **ETHN** - Chief of Staff (gpt-4o)
  not a bullet
- **BROKEN** without role
- **SCOUT** - Field Recon (gemini-pro)

## Notes

- **GHOST** - Should Not Appear (none)
"""


def test_list_files_only_markdown(client, workspace):
    memory = workspace / "memory"
    (memory / "2026-10-01.md").write_text("# Day one\n")
    (memory / "notes.md").write_text("hello")
    (memory / "image.png").write_bytes(b"\x89PNG")

    response = client.get("/api/files")
    assert response.status_code == 200
    files = response.json()
    assert [f["name"] for f in files] == ["2026-10-01.md", "notes.md"]
    notes = files[1]
    assert notes["path"] == "notes.md"
    assert notes["size"] == 5
    assert "updatedAt" in notes


def test_read_file(client, workspace):
    (workspace / "memory" / "notes.md").write_text("# Notes\nbody")
    response = client.get("/api/files/notes.md")
    assert response.status_code == 200
    assert response.json() == {"name": "notes.md", "content": "# Notes\nbody"}


@pytest.mark.parametrize("name", ["..secret.md", "..%2F..%2Fetc%2Fpasswd", "sub%2Fnotes.md", "..%5Cnotes.md"])
def test_read_file_rejects_traversal(client, workspace, monkeypatch, name):
    def fail_read(*args, **kwargs):
        raise AssertionError("filesystem must not be touched")

    monkeypatch.setattr(Path, "read_text", fail_read)
    response = client.get(f"/api/files/{name}")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file name"}


def test_read_missing_file_is_server_error(client, workspace):
    response = client.get("/api/files/absent.md")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to read file"}


def test_list_files_without_memory_dir_is_server_error(client, tmp_path, monkeypatch):
    from mission_control.config import settings

    monkeypatch.setattr(settings, "WORKSPACE_ROOT", tmp_path / "nowhere")
    response = client.get("/api/files")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch files"}


def test_validate_file_name():
    assert validate_file_name("notes.md") == "notes.md"
    for bad in ("../notes.md", "a/b.md", "a\\b.md", "..", ""):
        with pytest.raises(InvalidFileNameError):
            validate_file_name(bad)


def test_parse_team_roster():
    agents = parse_team_roster(ROSTER_MD)
    assert [a.name for a in agents] == ["VIPIN", "ETHN", "SCOUT"]
    assert agents[1].role == "Chief of Staff"
    assert agents[1].model == "gpt-4o"
    assert agents[0].id == "vipin"
    assert all(a.status == "Online" for a in agents)


def test_agents_endpoint(client, workspace):
    (workspace / "MEMORY.md").write_text(ROSTER_MD)
    response = client.get("/api/agents")
    assert response.status_code == 200
    assert response.json()[0] == {
        "id": "vipin",
        "name": "VIPIN",
        "role": "Investigator",
        "model": "claude-opus",
        "status": "Online",
    }


def test_agents_without_heading_is_empty(client, workspace):
    (workspace / "MEMORY.md").write_text("# Memory\n\n- **VIPIN** - Investigator (claude-opus)\n")
    response = client.get("/api/agents")
    assert response.status_code == 200
    assert response.json() == []


def test_agents_without_memory_file_is_empty(client, workspace):
    response = client.get("/api/agents")
    assert response.status_code == 200
    assert response.json() == []
