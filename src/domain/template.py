"""Template Variant

Closed set of layouts an invoice can be rendered with.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class TemplateVariant(str, Enum):
    """Invoice layout variants"""
    PROFESSIONAL = "professional"
    MINIMAL = "minimal"
    CREATIVE = "creative"

    @classmethod
    def default(cls) -> "TemplateVariant":
        return cls.PROFESSIONAL

    @classmethod
    def resolve(cls, template_id: Optional[str]) -> "TemplateVariant":
        """
        Decode a stored template id

        Unknown, empty or legacy ids fall back to the default variant.

        Args:
            template_id: Template id as stored on the invoice

        Returns:
            Matching TemplateVariant, or the default one
        """
        if isinstance(template_id, cls):
            return template_id

        if template_id:
            normalized = str(template_id).strip().lower()
            for variant in cls:
                if variant.value == normalized:
                    return variant
            logger.debug(f"Unknown template id '{template_id}', using {cls.default().value}")

        return cls.default()
