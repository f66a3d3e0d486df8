"""Persistence of generated artifacts.

Artifacts never share a target path, so they are written concurrently.  Each
write fully replaces any file already at that path.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .artifacts import Artifact


class ArtifactWriter:
    """Writes artifacts beneath a project root directory."""

    def __init__(self, project_root: str | Path) -> None:
        self.project_root = Path(project_root)

    def target_for(self, artifact: Artifact) -> Path:
        """Absolute destination of *artifact*.

        Raises:
            ValueError: If the artifact path escapes the project root.
        """
        target = (self.project_root / artifact.path).resolve()
        root = self.project_root.resolve()
        if target != root and root not in target.parents:
            raise ValueError(f"artifact path escapes project root: {artifact.path}")
        return target

    async def write_all(self, artifacts: list[Artifact]) -> list[Path]:
        """Write every artifact and return the written paths in input order."""
        targets = [self.target_for(artifact) for artifact in artifacts]
        await asyncio.gather(*[
            asyncio.to_thread(_write_file, target, artifact.content)
            for target, artifact in zip(targets, artifacts)
        ])
        return targets


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
