"""
API routes for application component renaming.

Stateless: the caller posts an Application manifest and persists whatever
comes back. Nothing is stored server-side.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from component_naming.core.config import get_settings
from component_naming.core.logging_config import LoggingConfig
from component_naming.models.application import Application
from component_naming.naming.contracts import NamingStrategy
from component_naming.naming.mapping_recorder import MappingRecorder
from component_naming.naming.renamer import ComponentRenamer

logger = LoggingConfig.get_logger(__name__)
router = APIRouter(prefix="/api/applications", tags=["applications"])


class RenameResponse(BaseModel):
    modified: bool
    mapping: Dict[str, str] = Field(default_factory=dict)
    application: Optional[Dict[str, Any]] = None


class ComponentMappingResponse(BaseModel):
    renamed: bool
    mapping: Dict[str, str] = Field(default_factory=dict)


@router.post("/rename", response_model=RenameResponse)
async def rename_application_components(
    application: Application,
    strategy: Optional[NamingStrategy] = Query(default=None, description="Override the configured strategy"),
):
    policy = get_settings().naming_policy
    if strategy is not None:
        policy = policy.model_copy(update={"strategy": strategy})

    LoggingConfig.set_context(application=application.name)
    result = ComponentRenamer(policy).rename_all(application)
    return RenameResponse(
        modified=result.modified,
        mapping=result.mapping,
        application=result.application.to_manifest() if result.application else None,
    )


@router.post("/component-mapping", response_model=ComponentMappingResponse)
async def get_component_mapping(application: Application):
    mapping = MappingRecorder().read(application)
    return ComponentMappingResponse(renamed=mapping is not None, mapping=mapping or {})
