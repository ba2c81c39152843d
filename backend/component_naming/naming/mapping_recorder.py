"""
MappingRecorder: persists the original -> new component name mapping as an
application annotation and reads it back for auditing.
"""

from __future__ import annotations

import json
from typing import Dict, Optional

from component_naming.core.errors import MappingDecodeError, MappingEncodeError
from component_naming.core.logging_config import LoggingConfig
from component_naming.models.application import Application
from component_naming.naming.contracts import ANNOTATION_COMPONENT_MAPPING

logger = LoggingConfig.get_logger(__name__)


# Characters Go's encoding/json escapes for safe embedding in HTML/JS.
# None of them is JSON syntax, so replacing them in the output only touches strings.
_HTML_SAFE_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def encode_mapping(mapping: Dict[str, str]) -> str:
    """Canonical JSON: sorted keys, compact separators, Go-style HTML escaping."""
    try:
        encoded = json.dumps(mapping, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MappingEncodeError(f"unable to encode component name mapping: {e}") from e
    for char, escaped in _HTML_SAFE_ESCAPES.items():
        encoded = encoded.replace(char, escaped)
    return encoded


def decode_mapping(value: str) -> Dict[str, str]:
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as e:
        raise MappingDecodeError(f"component mapping annotation is not valid JSON: {e}") from e
    if not isinstance(decoded, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in decoded.items()
    ):
        raise MappingDecodeError("component mapping annotation must be a JSON object of strings")
    return decoded


class MappingRecorder:
    annotation_key = ANNOTATION_COMPONENT_MAPPING

    def record(self, application: Application, mapping: Dict[str, str]) -> None:
        logger.info(
            "application component mapping",
            extra={"app_name": application.name, "names": mapping},
        )
        try:
            encoded = encode_mapping(mapping)
        except MappingEncodeError as e:
            e.application = application.name
            raise
        application.set_annotation(self.annotation_key, encoded)

    def read(self, application: Application) -> Optional[Dict[str, str]]:
        """Return the recorded mapping, or None if the application was never renamed."""
        value = application.get_annotations().get(self.annotation_key)
        if value is None:
            return None
        try:
            return decode_mapping(value)
        except MappingDecodeError as e:
            e.application = application.name
            raise

    def original_name(self, application: Application, new_name: str) -> Optional[str]:
        """Reverse lookup of a renamed component."""
        mapping = self.read(application) or {}
        for original, renamed in mapping.items():
            if renamed == new_name:
                return original
        return None
