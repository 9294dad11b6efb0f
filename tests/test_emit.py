"""Tests for emit.py module."""

from __future__ import annotations

from pathlib import Path

import pytest

from modelmapper.emit import (
    HEADER_LINES,
    bundle_module_name,
    render_artifacts,
    write_artifacts,
)
from modelmapper.frontend.runtime import declaration_for
from modelmapper.orchestrator import generate
from modelmapper.synthesis.source import GeneratedSource
from sample_domain.catalog import Catalog
from sample_domain.contracts import Contracts


@pytest.fixture
def sources() -> list[GeneratedSource]:
    declarations = [declaration_for(Contracts), declaration_for(Catalog)]
    return generate([d for d in declarations if d is not None]).sources


class TestBundleModuleName:
    def test_dots_become_underscores(self) -> None:
        assert bundle_module_name("app.mapping") == "app_mapping_models"


class TestRenderArtifacts:
    def test_files_layout_one_per_source(self, sources: list[GeneratedSource]) -> None:
        rendered = render_artifacts(sources, layout="files")

        assert list(rendered) == [s.hint_name for s in sources]
        assert all(text.startswith("# <auto-generated>\n") for text in rendered.values())

    def test_header_can_be_disabled(self, sources: list[GeneratedSource]) -> None:
        rendered = render_artifacts(sources, layout="files", header=False)

        assert all(text.startswith("from __future__ import annotations\n") for text in rendered.values())

    def test_bundle_layout_one_per_namespace(self, sources: list[GeneratedSource]) -> None:
        rendered = render_artifacts(sources, layout="bundle")

        assert list(rendered) == ["sample_domain_contracts_models.py", "sample_domain_catalog_models.py"]
        bundle = rendered["sample_domain_contracts_models.py"]
        assert bundle.count("from __future__ import annotations") == 1
        assert bundle.count("import enum\n") == 1
        assert "class PersonModel:" in bundle
        assert "class PairMapper:" in bundle

    def test_header_lines_are_comments(self) -> None:
        assert HEADER_LINES[0] == "<auto-generated>"


class TestWriteArtifacts:
    def test_given_empty_dir_then_files_created(
        self, tmp_path: Path, sources: list[GeneratedSource]
    ) -> None:
        # When
        written = write_artifacts(sources, tmp_path)

        # Then
        assert len(written) == 20
        assert all(w.action == "created" for w in written)
        assert (tmp_path / sources[0].hint_name).read_text() == sources[0].document.render(
            HEADER_LINES
        )

    def test_given_same_output_then_unchanged(
        self, tmp_path: Path, sources: list[GeneratedSource]
    ) -> None:
        write_artifacts(sources, tmp_path, layout="bundle")

        written = write_artifacts(sources, tmp_path, layout="bundle")

        assert [w.action for w in written] == ["unchanged", "unchanged"]

    def test_given_edited_file_then_updated(
        self, tmp_path: Path, sources: list[GeneratedSource]
    ) -> None:
        (first,) = write_artifacts(sources[:1], tmp_path)
        first.path.write_text("# edited\n")

        (again,) = write_artifacts(sources[:1], tmp_path)

        assert again.action == "updated"
        assert again.content_hash == first.content_hash
        assert first.path.read_text() != "# edited\n"

    def test_dry_run_writes_nothing(self, tmp_path: Path, sources: list[GeneratedSource]) -> None:
        out = tmp_path / "out"

        written = write_artifacts(sources, out, dry_run=True)

        assert len(written) == 20
        assert not out.exists()
