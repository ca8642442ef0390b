"""Section builder for generated scripts.

A script template is an ordered tuple of named sections. Each section
decides for itself whether it belongs in the output, so optional parts
can be tested one at a time instead of by matching the whole document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from gmsa_portal.domain.requests.entities import AccountType, RequestRecord
from .renderer import ScriptRenderer


@dataclass(frozen=True)
class ScriptContext:
    """Everything a section may read: the record and its rendered slot values."""

    record: RequestRecord
    variables: dict[str, str]
    spns: list[str] = field(default_factory=list)


def always(_: ScriptContext) -> bool:
    return True


@dataclass(frozen=True)
class ScriptSection:
    name: str
    body: str
    include: Callable[[ScriptContext], bool] = always
    # Emitted instead of ``body`` when ``include`` is false. None omits the section.
    fallback: str | None = None

    def render(self, ctx: ScriptContext, renderer: ScriptRenderer) -> str | None:
        if self.include(ctx):
            source = self.body
        elif self.fallback is not None:
            source = self.fallback
        else:
            return None
        return renderer.render(source.strip("\n"), ctx.variables)


@dataclass(frozen=True)
class ScriptTemplate:
    name: str
    account_type: AccountType
    sections: tuple[ScriptSection, ...]

    def section(self, name: str) -> ScriptSection:
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)

    def render(self, ctx: ScriptContext, renderer: ScriptRenderer) -> str:
        parts = [s.render(ctx, renderer) for s in self.sections]
        return "\n\n".join(p for p in parts if p is not None) + "\n"
