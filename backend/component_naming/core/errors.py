"""
Component naming error classification
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(str, Enum):
    """Error severity levels"""
    HIGH = "high"  # Pass aborted, caller must not persist the application
    MEDIUM = "medium"  # Stored data is unusable, pass may still proceed elsewhere
    LOW = "low"  # Non-fatal


class ErrorCategory(str, Enum):
    """Error categories for classification"""
    SERIALIZATION = "serialization"
    COLLISION = "collision"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class ComponentNamingError(Exception):
    """Base error raised by the rename pass"""

    severity: ErrorSeverity = ErrorSeverity.HIGH
    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        application: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.application = application
        self.metadata = metadata or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "message": self.message,
            "error_type": type(self).__name__,
            "severity": self.severity.value,
            "category": self.category.value,
            "application": self.application,
            "metadata": self.metadata,
        }


class MappingEncodeError(ComponentNamingError):
    """The component name mapping could not be serialized"""

    category = ErrorCategory.SERIALIZATION


class MappingDecodeError(ComponentNamingError):
    """A stored component mapping annotation is not a string-to-string JSON object"""

    severity = ErrorSeverity.MEDIUM
    category = ErrorCategory.SERIALIZATION


class NameCollisionError(ComponentNamingError):
    """Generated component names kept colliding after every allowed attempt"""

    category = ErrorCategory.COLLISION
