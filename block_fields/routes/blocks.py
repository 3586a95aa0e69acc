"""
Block Routes (admin)

GET    /api/v1/blocks                  → list blocks
GET    /api/v1/blocks/{slug}           → one block
PUT    /api/v1/blocks/{slug}           → create or replace a block (JSON)
DELETE /api/v1/blocks/{slug}           → delete a block
POST   /api/v1/blocks/{slug}/fields    → save fields from the "edit block" form
POST   /api/v1/blocks/{slug}/preview   → render a block, with editor notices
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field as PydanticField

from block_fields.blocks.block import Block
from block_fields.blocks.controls.registry import ControlRegistry
from block_fields.blocks.field import Field
from block_fields.blocks.forms import parse_field_submission, sanitize_field_settings
from block_fields.blocks.store import BlockStore, get_block_store
from block_fields.exceptions import ValidationError
from block_fields.plugins.hooks import HOOK_BLOCK_DELETED, HOOK_BLOCK_SAVED
from block_fields.plugins.registry import plugin_registry
from block_fields.routes.controls import get_control_registry
from block_fields.services.template_service import render_block
from block_fields.utils.sanitize import sanitize_text_field
from block_fields.utils.slugify import slugify

router = APIRouter(prefix="/blocks", tags=["Blocks"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class FieldIn(BaseModel):
    """Schema for one field of a block."""

    name: str
    label: str | None = None
    control: str
    settings: dict[str, Any] = PydanticField(default_factory=dict)


class BlockUpsert(BaseModel):
    """Schema for creating or replacing a block."""

    title: str
    icon: str = "block_lab"
    category: str = "common"
    keywords: list[str] = PydanticField(default_factory=list)
    fields: list[FieldIn] = PydanticField(default_factory=list)


class FieldResponse(BaseModel):
    name: str
    label: str
    control: str
    type: str
    order: int
    settings: dict[str, Any]


class BlockResponse(BaseModel):
    name: str
    title: str
    icon: str
    category: str
    keywords: list[str]
    fields: dict[str, FieldResponse]


class RenderRequest(BaseModel):
    """Attribute values to render a block with."""

    attributes: dict[str, Any] = PydanticField(default_factory=dict)


# ── Helpers ────────────────────────────────────────────────────────────────────


def block_slug(slug: str) -> str:
    """
    Path dependency normalising the `{slug}` segment.

    Every block route resolves the slug the same way, so a block saved as
    `/blocks/Hero` is read back from `/blocks/Hero` as well as `/blocks/hero`.
    """
    normalised = slugify(slug)
    if not normalised:
        raise ValidationError("Block slug must contain letters or digits", field="slug")
    return normalised


def _build_field(data: FieldIn, registry: ControlRegistry) -> Field:
    control = registry.get(data.control)
    name = slugify(sanitize_text_field(data.name), separator="_")
    if not name:
        raise ValidationError("Field name must contain letters or digits", field="name")
    label = sanitize_text_field(data.label) or name
    return Field(
        name=name,
        label=label,
        control=control.name,
        type=control.type,
        settings=sanitize_field_settings(control, data.settings),
    )


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("", response_model=list[BlockResponse])
async def list_blocks(store: BlockStore = Depends(get_block_store)) -> list[dict[str, Any]]:
    return [block.to_dict() for block in store.all()]


@router.get("/{slug}", response_model=BlockResponse)
async def get_block(
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
) -> dict[str, Any]:
    return store.get(slug).to_dict()


@router.put("/{slug}", response_model=BlockResponse)
async def upsert_block(
    data: BlockUpsert,
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
    registry: ControlRegistry = Depends(get_control_registry),
) -> dict[str, Any]:
    """Create or replace a block. Field settings are sanitized per control."""
    block = Block(
        name=slug,
        title=sanitize_text_field(data.title),
        icon=sanitize_text_field(data.icon),
        category=sanitize_text_field(data.category),
        keywords=[sanitize_text_field(k) for k in data.keywords],
    )
    block.set_fields([_build_field(f, registry) for f in data.fields])
    store.save(block)
    await plugin_registry.fire_hook(HOOK_BLOCK_SAVED, {"block": block.name})
    return block.to_dict()


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_block(
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
) -> None:
    store.delete(slug)
    await plugin_registry.fire_hook(HOOK_BLOCK_DELETED, {"block": slug})


@router.post("/{slug}/fields", response_model=BlockResponse)
async def save_block_fields(
    request: Request,
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
    registry: ControlRegistry = Depends(get_control_registry),
) -> dict[str, Any]:
    """Replace a block's fields with the rows posted by the "edit block" form."""
    block = store.get(slug)
    form = await request.form()
    block.set_fields(parse_field_submission(form, registry))
    store.save(block)
    await plugin_registry.fire_hook(HOOK_BLOCK_SAVED, {"block": block.name})
    return block.to_dict()


@router.post("/{slug}/preview", response_class=HTMLResponse)
async def preview_block(
    data: RenderRequest,
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
) -> HTMLResponse:
    """Render a block for the editor; a missing template shows a notice."""
    block = store.get(slug)
    return HTMLResponse(render_block(block, data.attributes, can_edit=True))
