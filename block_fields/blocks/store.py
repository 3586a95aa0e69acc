"""
Block Store

Blocks are persisted as one JSON document (settings.blocks_file) mapping
block slugs to block definitions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from block_fields.blocks.block import Block
from block_fields.config import settings
from block_fields.exceptions import BlockNotFoundError

logger = logging.getLogger(__name__)


class BlockStore:
    """Read/write access to the block definitions file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ── File I/O ──────────────────────────────────────────────────────────────

    def _load(self) -> dict[str, dict[str, Any]]:
        """
        Load raw block definitions from disk.

        Returns an empty mapping if the file does not exist or cannot be parsed.
        """
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to read blocks file %s: %s", self.path, exc)
                return {}
            if isinstance(data, dict):
                return data
            logger.warning("Ignoring blocks file %s: expected a JSON object", self.path)
        return {}

    def _save(self, data: dict[str, dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    # ── Public API ────────────────────────────────────────────────────────────

    def all(self) -> list[Block]:
        blocks = []
        for slug, raw in self._load().items():
            try:
                blocks.append(Block.from_dict({"name": slug, **raw}))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed block %s: %s", slug, exc)
        return blocks

    def get(self, slug: str) -> Block:
        raw = self._load().get(slug)
        if raw is None:
            raise BlockNotFoundError(slug)
        return Block.from_dict({"name": slug, **raw})

    def save(self, block: Block) -> Block:
        data = self._load()
        data[block.name] = block.to_dict()
        self._save(data)
        logger.info("Block saved: %s (%d fields)", block.name, len(block.fields))
        return block

    def delete(self, slug: str) -> None:
        data = self._load()
        if slug not in data:
            raise BlockNotFoundError(slug)
        del data[slug]
        self._save(data)
        logger.info("Block deleted: %s", slug)


def get_block_store() -> BlockStore:
    """FastAPI dependency returning a store bound to the configured file."""
    return BlockStore(settings.blocks_file)
