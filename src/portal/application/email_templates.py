"""Application services: e-mail template administration."""

from __future__ import annotations

from portal.domain.exceptions import EntityNotFoundError
from portal.domain.model.email_template import EmailTemplate
from portal.domain.repository.email_template_repository import (
    EmailTemplateRepository,
)


class UpdateEmailTemplateHandler:

    def __init__(self, template_repo: EmailTemplateRepository) -> None:
        self._template_repo = template_repo

    def handle(
        self,
        slug: str,
        subject: str | None = None,
        body: str | None = None,
        is_active: bool | None = None,
    ) -> EmailTemplate:
        template = self._template_repo.get_by_slug(slug)
        if template is None:
            raise EntityNotFoundError(f"E-mail template '{slug}' not found")
        if subject is not None:
            template.subject = subject
        if body is not None:
            template.body = body
        if is_active is not None:
            template.is_active = is_active
        self._template_repo.save(template)
        return template


class PreviewEmailTemplateHandler:

    def __init__(self, template_repo: EmailTemplateRepository) -> None:
        self._template_repo = template_repo

    def handle(self, slug: str, data: dict[str, object] | None = None) -> tuple[str, str]:
        """Render a template with *data*; placeholders without data stay visible."""
        template = self._template_repo.get_by_slug(slug)
        if template is None:
            raise EntityNotFoundError(f"E-mail template '{slug}' not found")
        return template.render(data or {})
