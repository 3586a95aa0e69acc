"""Tests for the Block and Field models and the JSON block store."""

import json
import logging

import pytest

from block_fields.blocks.block import Block
from block_fields.blocks.field import Field
from block_fields.blocks.store import BlockStore
from block_fields.exceptions import BlockNotFoundError, DuplicateFieldError


def _hero() -> Block:
    return Block(
        name="hero",
        title="Hero",
        keywords=["banner", "header"],
        fields={
            "title": Field(name="title", label="Title", control="text", order=0, settings={"default": "Welcome"}),
            "flag": Field(name="flag", label="Flag", control="toggle", type="boolean", order=1, settings={"default": True}),
        },
    )


class TestFieldModel:
    def test_defaults(self):
        field = Field(name="title")
        assert field.control == "text"
        assert field.type == "string"
        assert field.order == 0
        assert field.settings == {}

    def test_from_dict_fills_label(self):
        field = Field.from_dict({"name": "title", "order": "2"})
        assert field.label == "title"
        assert field.order == 2

    def test_to_dict(self):
        field = Field(name="n", label="N", control="number", type="integer", order=3, settings={"default": 5})
        assert field.to_dict() == {
            "name": "n",
            "label": "N",
            "control": "number",
            "type": "integer",
            "order": 3,
            "settings": {"default": 5},
        }


class TestBlockModel:
    def test_keywords_limited_to_three(self):
        block = Block(name="b", keywords=["a", "", "b", "c", "d"])
        assert block.keywords == ["a", "b", "c"]

    def test_fields_sorted_by_order(self):
        block = Block(
            name="b",
            fields={
                "second": Field(name="second", order=1),
                "first": Field(name="first", order=0),
            },
        )
        assert list(block.fields) == ["first", "second"]

    def test_add_field_duplicate_raises(self):
        block = _hero()
        with pytest.raises(DuplicateFieldError) as exc_info:
            block.add_field(Field(name="title"))
        assert exc_info.value.status_code == 409

    def test_set_fields_uses_list_position(self):
        block = _hero()
        block.set_fields([Field(name="b", order=7), Field(name="a", order=3)])
        assert list(block.fields) == ["b", "a"]
        assert block.fields["a"].order == 1

    def test_default_attributes(self):
        assert _hero().default_attributes() == {"title": "Welcome", "flag": True}

    def test_from_dict_accepts_field_list(self):
        block = Block.from_dict(
            {
                "name": "card",
                "fields": [
                    {"name": "body", "control": "textarea", "order": 1},
                    {"name": "heading", "control": "text", "order": 0},
                ],
            }
        )
        assert list(block.fields) == ["heading", "body"]
        assert block.icon == "block_lab"
        assert block.category == "common"

    def test_json_round_trip(self):
        block = _hero()
        restored = Block.from_json(block.to_json())
        assert restored == block


class TestBlockStore:
    def test_missing_file_is_empty(self, store):
        assert store.all() == []

    def test_get_missing_raises(self, store):
        with pytest.raises(BlockNotFoundError):
            store.get("hero")

    def test_save_and_get(self, store, blocks_file):
        store.save(_hero())
        assert blocks_file.exists()
        assert store.get("hero") == _hero()
        assert "hero" in json.loads(blocks_file.read_text(encoding="utf-8"))

    def test_save_replaces(self, store):
        store.save(_hero())
        store.save(Block(name="hero", title="New"))
        (block,) = store.all()
        assert block.title == "New"
        assert block.fields == {}

    def test_delete(self, store):
        store.save(_hero())
        store.delete("hero")
        assert store.all() == []

    def test_delete_missing_raises(self, store):
        with pytest.raises(BlockNotFoundError):
            store.delete("hero")

    def test_corrupt_file_is_empty(self, store, blocks_file, caplog):
        blocks_file.parent.mkdir(parents=True)
        blocks_file.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="block_fields.blocks.store"):
            assert store.all() == []
        assert "Failed to read blocks file" in caplog.text

    def test_malformed_entry_skipped(self, blocks_file):
        blocks_file.parent.mkdir(parents=True)
        blocks_file.write_text(
            json.dumps({"ok": {"title": "OK"}, "bad": {"fields": {"x": {"order": "nope"}}}}),
            encoding="utf-8",
        )
        assert [b.name for b in BlockStore(blocks_file).all()] == ["ok"]
