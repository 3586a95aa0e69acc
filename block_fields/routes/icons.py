"""Icon Routes"""

from fastapi import APIRouter

from block_fields.services.icon_service import get_icons, sanitize_svg

router = APIRouter(prefix="/icons", tags=["Icons"])


@router.get("")
async def list_icons() -> dict[str, str]:
    """Every available block icon, keyed by name, as sanitized SVG."""
    return {name: sanitize_svg(svg) for name, svg in get_icons().items()}
