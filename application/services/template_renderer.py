from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from domain.fixtures import CardNumber, FundingSource, lookup_fixture


class TemplateRenderError(Exception):
    pass


@dataclass(frozen=True)
class RenderSources:
    ids: Dict[str, str] = field(default_factory=dict)


class TemplateRenderer:
    """
    Expands ${ids.xxx}, ${sources.xxx} and ${cards.xxx} in step paths and params.
    - ids: identifiers captured by earlier steps of the same run
    - sources: FundingSource members by name, e.g. ${sources.declined} => tok_chargeDeclined
    - cards: CardNumber members by name, e.g. ${cards.visa} => 4242424242424242
    A reference that does not resolve raises; nothing is substituted silently.
    """

    def render_params(self, params: Iterable[str], src: RenderSources) -> List[str]:
        return [self.render_str(p, src) for p in params]

    def render_str(self, s: str, src: RenderSources) -> str:
        if s is None:
            return ""
        if "${" not in s:
            return s

        result = ""
        i = 0
        while i < len(s):
            start = s.find("${", i)
            if start < 0:
                result += s[i:]
                break
            result += s[i:start]
            end = s.find("}", start + 2)
            if end < 0:
                raise TemplateRenderError(f"unclosed template: {s}")
            expr = s[start + 2 : end].strip()
            result += self._eval(expr, src)
            i = end + 1

        return result

    def references(self, s: str) -> List[Tuple[str, str]]:
        """(root, name) pairs referenced by a template, in order."""
        out: List[Tuple[str, str]] = []
        i = 0
        while True:
            start = s.find("${", i)
            if start < 0:
                return out
            end = s.find("}", start + 2)
            if end < 0:
                raise TemplateRenderError(f"unclosed template: {s}")
            out.append(self._split_root(s[start + 2 : end].strip()))
            i = end + 1

    def _eval(self, expr: str, src: RenderSources) -> str:
        root, name = self._split_root(expr)
        if name == "":
            raise TemplateRenderError(f"missing name after root: {expr}")

        if root == "ids":
            value = src.ids.get(name)
            if value is None:
                raise TemplateRenderError(f"unresolved reference: {expr}")
            return value
        if root == "sources":
            return self._fixture(FundingSource, expr, name)
        if root == "cards":
            return self._fixture(CardNumber, expr, name)

        raise TemplateRenderError(f"unknown root: {root}")

    def _fixture(self, enum_cls, expr: str, name: str) -> str:
        member = lookup_fixture(enum_cls, name)
        if member is None:
            raise TemplateRenderError(f"unknown fixture: {expr}")
        return member.value

    def _split_root(self, expr: str) -> Tuple[str, str]:
        if "." in expr:
            a, b = expr.split(".", 1)
            return a, b
        return expr, ""
