"""Editable e-mail templates with ``{{key}}`` placeholders."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")


def render_placeholders(text: str, data: dict[str, object]) -> str:
    """Replace ``{{key}}`` with ``data[key]``.

    Placeholders without a matching key are left as they are.
    """

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in data or data[key] is None:
            return match.group(0)
        return str(data[key])

    return _PLACEHOLDER.sub(_sub, text or "")


def placeholders_in(text: str) -> list[str]:
    seen: list[str] = []
    for key in _PLACEHOLDER.findall(text or ""):
        if key not in seen:
            seen.append(key)
    return seen


@dataclass
class EmailTemplate:
    """Template keyed by ``slug``; the slug matches a notification kind."""

    slug: str
    name: str
    subject: str
    body: str
    is_active: bool = True
    variables_hint: list[str] = field(default_factory=list)

    def render(self, data: dict[str, object]) -> tuple[str, str]:
        """Return the (subject, body) pair with *data* substituted."""
        return render_placeholders(self.subject, data), render_placeholders(self.body, data)

    @property
    def variables(self) -> list[str]:
        """Hinted variables, or the ones found in the text."""
        if self.variables_hint:
            return list(self.variables_hint)
        return placeholders_in(self.subject + "\n" + self.body)
