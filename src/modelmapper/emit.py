"""Write generated artifacts to disk.

Two layouts:

- ``files``: one file per artifact, named by its hint name.
- ``bundle``: one module per destination namespace holding every model and
  mapper of that target, importable as a whole.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import structlog

from modelmapper.config.models import OutputLayout
from modelmapper.synthesis.source import GeneratedSource, bundle_documents

log = structlog.get_logger(__name__)

HEADER_LINES = (
    "<auto-generated>",
    "Generated by modelmapper. Do not edit by hand; changes are overwritten.",
    "</auto-generated>",
)
BUNDLE_SUFFIX = "_models"


@dataclass(frozen=True)
class WrittenArtifact:
    """One file the emitter produced (or would produce, on a dry run)."""

    path: Path
    action: Literal["created", "updated", "unchanged"]
    content_hash: str


def _hash_content(content: str) -> str:
    return hashlib.sha256(content.encode()).hexdigest()[:12]


def bundle_module_name(target_namespace: str) -> str:
    """Module name of a bundle, e.g. ``app.mapping`` -> ``app_mapping_models``."""
    return target_namespace.replace(".", "_") + BUNDLE_SUFFIX


def render_artifacts(
    sources: Iterable[GeneratedSource],
    *,
    layout: OutputLayout = "files",
    header: bool = True,
) -> dict[str, str]:
    """File name -> content for the given layout, in source order."""
    header_lines = HEADER_LINES if header else ()
    if layout == "files":
        return {s.hint_name: s.document.render(header_lines) for s in sources}

    by_namespace: dict[str, list[GeneratedSource]] = {}
    for source in sources:
        by_namespace.setdefault(source.target_namespace, []).append(source)
    return {
        f"{bundle_module_name(namespace)}.py": bundle_documents(
            s.document for s in group
        ).render(header_lines)
        for namespace, group in by_namespace.items()
    }


def write_artifacts(
    sources: Iterable[GeneratedSource],
    output_dir: Path,
    *,
    layout: OutputLayout = "files",
    header: bool = True,
    dry_run: bool = False,
) -> list[WrittenArtifact]:
    """Write artifacts under output_dir; files with identical content are left alone."""
    written: list[WrittenArtifact] = []
    for name, content in render_artifacts(sources, layout=layout, header=header).items():
        path = output_dir / name
        new_hash = _hash_content(content)
        if path.exists():
            if _hash_content(path.read_text()) == new_hash:
                written.append(WrittenArtifact(path, "unchanged", new_hash))
                continue
            action: Literal["created", "updated", "unchanged"] = "updated"
        else:
            action = "created"

        if not dry_run:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        written.append(WrittenArtifact(path, action, new_hash))

    log.info(
        "artifacts_written",
        directory=str(output_dir),
        layout=layout,
        files=len(written),
        dry_run=dry_run,
    )
    return written
