"""
RenameGuard: idempotency gate for the rename pass.
"""

from __future__ import annotations

from component_naming.models.application import Application
from component_naming.naming.contracts import ANNOTATION_COMPONENT_MAPPING


class RenameGuard:
    marker_key = ANNOTATION_COMPONENT_MAPPING

    def evaluate(self, application: Application) -> bool:
        """Return True if the application has never been through a rename pass.

        Only the presence of the marker counts; its value is not checked
        against the current component names.
        """
        return self.marker_key not in application.get_annotations()
