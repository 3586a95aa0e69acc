"""
Control Routes

GET /api/v1/controls                  → list controls and their settings
GET /api/v1/controls/{name}           → one control
GET /api/v1/controls/{name}/settings  → settings rows (HTML) for a new field row
"""

from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from block_fields.blocks.controls.registry import ControlRegistry, control_registry
from block_fields.blocks.field import Field

router = APIRouter(prefix="/controls", tags=["Controls"])


class SettingResponse(BaseModel):
    name: str
    label: str
    type: str
    default: Any = None
    help: str = ""


class ControlResponse(BaseModel):
    name: str
    label: str
    type: str
    settings: list[SettingResponse]


def get_control_registry() -> ControlRegistry:
    """FastAPI dependency returning the global control registry."""
    return control_registry


@router.get("", response_model=list[ControlResponse])
async def list_controls(registry: ControlRegistry = Depends(get_control_registry)) -> list[dict[str, Any]]:
    """List every registered control with its settings."""
    return [control.describe() for control in registry.all()]


@router.get("/{name}", response_model=ControlResponse)
async def get_control(name: str, registry: ControlRegistry = Depends(get_control_registry)) -> dict[str, Any]:
    return registry.get(name).describe()


@router.get("/{name}/settings", response_class=HTMLResponse)
async def get_control_settings(
    name: str,
    uid: str | None = Query(default=None, max_length=64, pattern=r"^[A-Za-z0-9_-]+$"),
    registry: ControlRegistry = Depends(get_control_registry),
) -> HTMLResponse:
    """
    Render the settings rows for a new field using this control.

    The admin calls this when a field's control is changed; `uid` ties the
    inputs to the field row.
    """
    control = registry.get(name)
    uid = uid or uuid.uuid4().hex[:12]
    field = Field(name="", control=control.name, type=control.type)
    return HTMLResponse(control.render_settings(field, uid))
