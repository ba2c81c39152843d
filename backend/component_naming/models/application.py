"""
Application manifest models (core.oam.dev/v1beta1 Application)

Only the fields the rename pass touches are typed. Everything else in the
manifest (traits, policies, workflow, status, ...) is carried through as extra
fields so a renamed manifest can be handed back to the caller intact.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ObjectMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Application name")
    namespace: Optional[str] = None
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)

    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return v or {}


class ApplicationComponent(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    type: str = Field(..., description="Component type, opaque to the rename pass")
    properties: Optional[Dict[str, Any]] = None


class ApplicationSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    components: List[ApplicationComponent] = Field(default_factory=list)

    @model_validator(mode="after")
    def component_names_unique(self) -> "ApplicationSpec":
        seen = set()
        for component in self.components:
            if component.name in seen:
                raise ValueError(f"duplicate component name: {component.name}")
            seen.add(component.name)
        return self


class Application(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="core.oam.dev/v1beta1", alias="apiVersion")
    kind: str = "Application"
    metadata: ObjectMeta
    spec: ApplicationSpec = Field(default_factory=ApplicationSpec)

    @property
    def name(self) -> str:
        return self.metadata.name

    def get_annotations(self) -> Dict[str, str]:
        return self.metadata.annotations

    def set_annotation(self, key: str, value: str) -> None:
        """Set a metadata annotation, overwriting any previous value."""
        self.metadata.annotations[key] = value

    def component_names(self) -> List[str]:
        return [c.name for c in self.spec.components]

    def to_manifest(self) -> Dict[str, Any]:
        """Serialize back to the camelCase manifest shape."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
