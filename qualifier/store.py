"""
Artifact store: writes the selected query to the configured output file.
"""

from __future__ import annotations

from pathlib import Path

from qualifier.domain.errors import StoreError
from qualifier.domain.models import Artifact
from qualifier.utils.logging import get_logger

log = get_logger(__name__)


def store_artifact(artifact: Artifact, path: Path | str) -> Path:
    """
    Write the artifact content as UTF-8, replacing any existing file.

    Parent directories are not created. Nothing is appended after the content.

    Raises:
        StoreError: If the path cannot be written.
    """
    target = Path(path)
    data = artifact.content.encode("utf-8")
    try:
        with target.open("wb") as f:
            f.write(data)
    except OSError as exc:
        raise StoreError(f"Could not write artifact to {target}: {exc}") from exc

    log.debug("Artifact written", extra={"path": str(target), "bytes": len(data)})
    return target


__all__ = ["store_artifact"]
