"""
Contract models for the component naming layer.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from component_naming.models.application import Application

if TYPE_CHECKING:
    from component_naming.core.config import Settings


ANNOTATION_COMPONENT_MAPPING = "app.oam.dev/component-mapping"
RANDOM_SUFFIX_LENGTH = 6


class NamingStrategy(str, Enum):
    PREFIX_APPLICATION_NAME = "prefix_application_name"
    RANDOM_SUFFIX = "random_suffix"
    NONE = "none"


class NamingPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    strategy: NamingStrategy = NamingStrategy.PREFIX_APPLICATION_NAME
    max_attempts: int = Field(default=3, ge=1)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "NamingPolicy":
        # Prefix takes priority when both switches are on.
        if settings.component_name_randomization_adding_application_name:
            strategy = NamingStrategy.PREFIX_APPLICATION_NAME
        elif settings.component_name_randomization_adding_suffix:
            strategy = NamingStrategy.RANDOM_SUFFIX
        else:
            strategy = NamingStrategy.NONE
        return cls(
            enabled=settings.enable_component_name_randomization,
            strategy=strategy,
            max_attempts=settings.component_name_max_attempts,
        )


class RenameResult(BaseModel):
    application: Optional[Application] = None
    modified: bool = False
    mapping: Dict[str, str] = Field(default_factory=dict)
