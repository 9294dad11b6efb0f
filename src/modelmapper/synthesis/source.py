"""Structured source builder.

Synthesizers never concatenate raw text. They append typed fragments to a
``SourceDocument``; rendering decides line endings, indentation, import
ordering and the blank lines between top-level blocks.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum

INDENT = "    "


class FragmentKind(str, Enum):
    FUTURE = "future"
    IMPORT = "import"
    LINE = "line"
    BLANK = "blank"


@dataclass(frozen=True, slots=True)
class Fragment:
    """One typed piece of a document.

    IMPORT fragments carry the module in ``text`` and, for ``from`` imports,
    the imported name in ``name``. LINE fragments carry unindented text plus
    an indentation level.
    """

    kind: FragmentKind
    text: str = ""
    indent: int = 0
    name: str | None = None


@dataclass(slots=True)
class SourceDocument:
    """An ordered list of fragments that renders to Python source."""

    fragments: list[Fragment] = field(default_factory=list)
    _level: int = 0

    def future_annotations(self) -> SourceDocument:
        self.fragments.append(Fragment(FragmentKind.FUTURE, "annotations"))
        return self

    def import_module(self, module: str) -> SourceDocument:
        self.fragments.append(Fragment(FragmentKind.IMPORT, module))
        return self

    def import_from(self, module: str, name: str) -> SourceDocument:
        self.fragments.append(Fragment(FragmentKind.IMPORT, module, name=name))
        return self

    def line(self, text: str) -> SourceDocument:
        self.fragments.append(Fragment(FragmentKind.LINE, text, self._level))
        return self

    def blank(self) -> SourceDocument:
        self.fragments.append(Fragment(FragmentKind.BLANK))
        return self

    @contextmanager
    def block(self, header: str) -> Iterator[SourceDocument]:
        """Write header, then indent everything written inside the with-block."""
        self.line(header)
        self._level += 1
        try:
            yield self
        finally:
            self._level -= 1

    @property
    def body(self) -> list[Fragment]:
        return [f for f in self.fragments if f.kind in (FragmentKind.LINE, FragmentKind.BLANK)]

    @property
    def imports(self) -> list[Fragment]:
        return [f for f in self.fragments if f.kind is FragmentKind.IMPORT]

    @property
    def has_future(self) -> bool:
        return any(f.kind is FragmentKind.FUTURE for f in self.fragments)

    def render(self, header: Iterable[str] = ()) -> str:
        lines: list[str] = [f"# {h}" if h else "#" for h in header]
        if lines:
            lines.append("")
        if self.has_future:
            lines.append("from __future__ import annotations")
            lines.append("")
        import_lines = _render_imports(self.imports)
        if import_lines:
            lines.extend(import_lines)
            lines.append("")

        body = _render_body(self.body)
        if body:
            if lines:
                # Two blank lines before the first top-level definition
                lines.append("")
            lines.extend(body)

        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n"


def _render_imports(imports: list[Fragment]) -> list[str]:
    plain: set[str] = set()
    named: dict[str, set[str]] = {}
    for fragment in imports:
        if fragment.name is None:
            plain.add(fragment.text)
        else:
            named.setdefault(fragment.text, set()).add(fragment.name)

    lines: list[str] = []
    for module in sorted(plain | named.keys()):
        if module in plain:
            lines.append(f"import {module}")
        if module in named:
            lines.append(f"from {module} import {', '.join(sorted(named[module]))}")
    return lines


def _render_body(body: list[Fragment]) -> list[str]:
    lines: list[str] = []
    for fragment in body:
        if fragment.kind is FragmentKind.BLANK:
            lines.append("")
        else:
            lines.append(INDENT * fragment.indent + fragment.text)
    return lines


def bundle_documents(documents: Iterable[SourceDocument]) -> SourceDocument:
    """Merge documents into one module: shared imports, bodies in order."""
    bundle = SourceDocument()
    bodies: list[list[Fragment]] = []
    future = False
    for document in documents:
        future = future or document.has_future
        bundle.fragments.extend(document.imports)
        if document.body:
            bodies.append(document.body)

    if future:
        bundle.fragments.insert(0, Fragment(FragmentKind.FUTURE, "annotations"))
    for index, body in enumerate(bodies):
        if index:
            bundle.blank().blank()
        bundle.fragments.extend(body)
    return bundle


class ArtifactKind(str, Enum):
    MODEL = "model"
    MAPPER = "mapper"


@dataclass(frozen=True, slots=True)
class GeneratedSource:
    """One generated artifact, addressed by its hint (file) name."""

    hint_name: str
    kind: ArtifactKind
    target_namespace: str
    document: SourceDocument

    @property
    def text(self) -> str:
        return self.document.render()
