"""Abstract repository for e-mail templates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from portal.domain.model.email_template import EmailTemplate


class EmailTemplateRepository(ABC):

    @abstractmethod
    def get_by_slug(self, slug: str) -> EmailTemplate | None:
        """Return a template by slug, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[EmailTemplate]:
        """Return every template, ordered by name."""

    @abstractmethod
    def save(self, template: EmailTemplate) -> None:
        """Persist a new or updated template."""
