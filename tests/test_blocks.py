"""Tests registry des blocs — prédicats, narrow, bloc générique, union AnyBlock."""
import pytest
from pydantic import TypeAdapter

from pumpkin_cms.blocks import (
    AnyBlock, BLOCK_REGISTRY, SUPPORTED_BLOCK_TYPES, UNKNOWN_TAG,
    BlockTag, Card, CardGridBlock, FaqBlock, GenericBlock, HeroBlock, HeroContent,
    block_model_for, is_block_like, is_block_of_type, is_known_tag,
    make_generic_block, narrow,
)


# ── Table ────────────────────────────────────────────────────────────────────

def test_registry_covers_every_tag():
    assert set(BLOCK_REGISTRY) == set(BlockTag)
    assert len(SUPPORTED_BLOCK_TYPES) == 14
    assert "PrimaryCTA" in SUPPORTED_BLOCK_TYPES


def test_registry_models_carry_their_tag():
    for tag, cls in BLOCK_REGISTRY.items():
        assert cls().type == tag.value


def test_is_known_tag():
    assert is_known_tag("Hero")
    assert not is_known_tag("hero")
    assert not is_known_tag("Mystery")
    assert not is_known_tag(None)


def test_block_model_for():
    assert block_model_for("FAQ") is FaqBlock
    assert block_model_for("Mystery") is None


# ── is_block_like ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("obj, expected", [
    ({"type": "Hero", "content": {}}, True),
    ({"type": "Mystery", "content": {"a": 1}}, True),
    ({"type": "Hero"}, False),
    ({"type": "Hero", "content": "text"}, False),
    ({"type": 3, "content": {}}, False),
    ("Hero", False),
    (None, False),
])
def test_is_block_like(obj, expected):
    assert is_block_like(obj) is expected


def test_typed_block_is_block_like():
    assert is_block_like(HeroBlock())
    assert is_block_of_type(HeroBlock(), "Hero")
    assert not is_block_of_type(HeroBlock(), "FAQ")


# ── make_generic_block ───────────────────────────────────────────────────────

def test_generic_block_keeps_tag_and_payload():
    b = make_generic_block("Mystery", {"a": 1})
    assert isinstance(b, GenericBlock)
    assert b.type == "Mystery"
    assert b.content == {"a": 1}


def test_generic_block_is_total():
    b = make_generic_block(42, "not-a-payload")
    assert b.type == UNKNOWN_TAG
    assert b.content == {}


# ── narrow ───────────────────────────────────────────────────────────────────

def test_narrow_returns_typed_instance_unchanged():
    hero = HeroBlock(content=HeroContent(headline="Hi"))
    assert narrow(hero, "Hero") is hero


def test_narrow_rejects_mismatched_tag():
    assert narrow(HeroBlock(), "FAQ") is None


def test_narrow_rejects_unknown_tag():
    assert narrow(make_generic_block("Mystery", {"a": 1}), "Mystery") is None


def test_narrow_rebuilds_generic_with_known_tag():
    typed = narrow(make_generic_block("Hero", {"headline": "Yo"}), "Hero")
    assert isinstance(typed, HeroBlock)
    assert typed.content.headline == "Yo"


def test_narrow_keeps_payload_of_unexpected_type():
    typed = narrow(make_generic_block("CardGrid", {"cards": "nope", "title": "T"}), "CardGrid")
    assert isinstance(typed, CardGridBlock)
    assert typed.content.cards == "nope"
    assert typed.content.title == "T"


def test_narrow_non_object_content_is_none():
    assert narrow({"type": "Hero", "content": "x"}, "Hero") is None


def test_narrow_accepts_raw_dict():
    typed = narrow({"type": "CardGrid", "content": {"title": "T"}}, "CardGrid")
    assert isinstance(typed, CardGridBlock)
    assert typed.content.title == "T"


# ── Modèles / sérialisation ──────────────────────────────────────────────────

def test_payload_keys_are_camel_case_on_the_wire():
    hero = HeroBlock.model_validate({"type": "Hero", "content": {"backgroundImage": "/bg.jpg"}})
    assert hero.content.background_image == "/bg.jpg"
    assert "backgroundImage" in hero.model_dump(by_alias=True)["content"]


def test_card_image_alt_hyphen_alias():
    card = Card.model_validate({"image-alt": "Façade"})
    assert card.image_alt == "Façade"
    assert card.model_dump(by_alias=True)["image-alt"] == "Façade"


def test_unset_presentation_keys_are_not_written():
    data = HeroBlock().model_dump(by_alias=True)
    assert set(data) == {"type", "content"}


def test_set_presentation_keys_are_written():
    data = HeroBlock(id="b1", display_name="Accueil", enabled=False).model_dump(by_alias=True)
    assert data["id"] == "b1"
    assert data["displayName"] == "Accueil"
    assert data["enabled"] is False


def test_unknown_payload_keys_survive():
    hero = HeroBlock.model_validate({"type": "Hero", "content": {"headline": "H", "badge": "New"}})
    assert hero.model_dump(by_alias=True)["content"]["badge"] == "New"


# ── AnyBlock ─────────────────────────────────────────────────────────────────

def test_any_block_picks_typed_arm():
    adapter = TypeAdapter(AnyBlock)
    assert isinstance(adapter.validate_python({"type": "FAQ", "content": {}}), FaqBlock)


def test_any_block_unknown_tag_goes_generic():
    adapter = TypeAdapter(AnyBlock)
    b = adapter.validate_python({"type": "Mystery", "content": {"a": 1}})
    assert isinstance(b, GenericBlock)
    assert b.content == {"a": 1}


def test_any_block_keeps_generic_instance():
    adapter = TypeAdapter(AnyBlock)
    generic = make_generic_block("CardGrid", {})
    assert isinstance(adapter.validate_python(generic), GenericBlock)
