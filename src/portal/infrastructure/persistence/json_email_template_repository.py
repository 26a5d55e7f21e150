"""JSON-file-backed implementation of EmailTemplateRepository."""

from __future__ import annotations

from portal.domain.model.email_template import EmailTemplate
from portal.domain.repository.email_template_repository import (
    EmailTemplateRepository,
)
from portal.infrastructure.persistence.json_collection import JsonCollection


class JsonEmailTemplateRepository(JsonCollection, EmailTemplateRepository):

    def get_by_slug(self, slug: str) -> EmailTemplate | None:
        for raw in self._load_raw():
            if raw["slug"] == slug:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[EmailTemplate]:
        templates = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(templates, key=lambda t: t.name.lower())

    def save(self, template: EmailTemplate) -> None:
        records = self._load_raw()
        self._upsert_raw(records, {
            "slug": template.slug,
            "name": template.name,
            "subject": template.subject,
            "body": template.body,
            "is_active": template.is_active,
            "variables_hint": list(template.variables_hint),
        }, key="slug")
        self._persist_raw(records)

    @staticmethod
    def _to_domain(raw: dict) -> EmailTemplate:
        hints = raw.get("variables_hint") or []
        if isinstance(hints, dict):
            hints = list(hints)
        return EmailTemplate(
            slug=raw["slug"],
            name=raw.get("name") or raw["slug"],
            subject=raw.get("subject", ""),
            body=raw.get("body", ""),
            is_active=bool(raw.get("is_active", True)),
            variables_hint=list(hints),
        )
