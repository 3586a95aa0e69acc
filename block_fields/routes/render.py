"""
Public Block Rendering

POST /blocks/{slug}/render → render a block with the given attribute values
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from block_fields.blocks.store import BlockStore, get_block_store
from block_fields.routes.blocks import RenderRequest, block_slug
from block_fields.services.template_service import render_block

router = APIRouter(prefix="/blocks", tags=["Render"])


@router.post("/{slug}/render", response_class=HTMLResponse)
async def render(
    data: RenderRequest,
    slug: str = Depends(block_slug),
    store: BlockStore = Depends(get_block_store),
) -> HTMLResponse:
    """Render a block for visitors. A missing template renders nothing."""
    block = store.get(slug)
    return HTMLResponse(render_block(block, data.attributes, can_edit=False))
