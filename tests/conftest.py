"""Root test configuration: a small documentation repository on disk"""

from pathlib import Path

import pytest


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(name="repo")
def repo_fixture(tmp_path) -> Path:
    """docs/ with a repository root, nested document/presentation, an unknown
    item, and a marker-less directory whose child gets promoted."""
    root = tmp_path / "docs"
    _write(root / "repository.md", "# Docs\n\nThe documentation root.\n")
    _write(root / "a" / "document.md", "---\ntags: [x, y]\n---\n# Alpha\n\nFirst paragraph.\n")
    (root / "a" / "diagram.png").write_bytes(b"\x89PNG")
    _write(root / "a" / "a1" / "presentation.md", "# Slides\n\n---\n\nSlide two.\n")
    _write(root / "b" / "notes.md", "# Notes\n")
    _write(root / "c" / "c1" / "Message.md", "# Hi\n")
    _write(root / ".git" / "readme.md", "# ignored\n")
    return root
