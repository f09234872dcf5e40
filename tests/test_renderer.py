"""Tests renderer — dispatch, surcharges, vues, header/footer, page complète, sitemap."""
import pytest

from pumpkin_cms.blocks import BlockTag, GenericBlock, HeroBlock, HeroContent, make_generic_block
from pumpkin_cms.codec import parse_page_dict
from pumpkin_cms.core import Theme
from pumpkin_cms.renderer import (
    BLOCK_VIEWS, BlockOverrides, BlogOverrides, ContactOverrides,
    build_metadata, build_sitemap_xml, render_block, render_footer,
    render_header, render_page,
)
from pumpkin_cms.styles import DEFAULT_CLASS_NAMES


def _page(blocks=None, **extra):
    doc = {
        "PageId": "p1",
        "pageSlug": "plombier-paris",
        "PageVersion": 1,
        "MetaData": {"title": "Plombier Paris", "description": "Dépannage 24/7", "language": "fr-fr"},
        "ContentData": {"ContentBlocks": blocks or []},
    }
    doc.update(extra)
    page = parse_page_dict(doc)
    assert page is not None
    return page


def _theme(**extra) -> Theme:
    data = {
        "name": "Acme",
        "header": {"sticky": True, "ctaText": "Devis gratuit", "ctaUrl": "/devis"},
        "footer": {"copyright": "© {YEAR} Acme", "description": "Artisans depuis 1990"},
        "menu": [
            {"label": "Beta", "url": "/beta", "order": 2},
            {"label": "Alpha", "url": "/alpha", "order": 1},
            {"label": "Hidden", "url": "/hidden", "isVisible": False},
            {"label": "Services", "url": "#", "order": 3, "children": [
                {"label": "Plomberie", "url": "/plomberie"},
            ]},
        ],
    }
    data.update(extra)
    return Theme.model_validate(data)


# ── Dispatch ─────────────────────────────────────────────────────────────────

def test_views_cover_every_tag():
    assert set(BLOCK_VIEWS) == set(BlockTag)


def test_unknown_tag_without_fallback_is_empty():
    assert render_block(GenericBlock(type="Mystery", content={"a": 1})) == ""


def test_unknown_tag_uses_fallback():
    html = render_block(GenericBlock(type="Mystery"), fallback=lambda b: f"<p>Unknown block type: {b.type}</p>")
    assert html == "<p>Unknown block type: Mystery</p>"


def test_non_object_content_uses_fallback():
    block = {"type": "FAQ", "content": "x"}
    assert render_block(block) == ""
    assert render_block(block, fallback=lambda b: "fallback") == "fallback"


def test_known_tag_with_mistyped_field_renders_its_view():
    html = render_block({"type": "Hero", "content": {"headline": "Hi", "subheadline": 5}, "id": 7})
    assert DEFAULT_CLASS_NAMES[BlockTag.HERO]["root"] in html
    assert "Hi" in html
    assert ">5</p>" in html


def test_known_tag_with_non_list_payload_renders_its_view():
    html = render_block(make_generic_block("FAQ", {"items": "nope", "title": "Questions"}))
    assert DEFAULT_CLASS_NAMES[BlockTag.FAQ]["root"] in html
    assert "Questions" in html
    assert "nope" not in html


def test_raw_list_items_are_skipped():
    html = render_block({"type": "Testimonials", "content": {"items": [
        {"quote": "Top", "author": "Ana", "rating": "lots"}, "junk",
    ]}})
    assert "Top" in html
    assert "junk" not in html
    assert "out of 5" not in html


@pytest.mark.parametrize("tag", list(BlockTag))
def test_every_tag_renders_empty_payload(tag):
    html = render_block({"type": tag.value, "content": {}})
    assert DEFAULT_CLASS_NAMES[tag]["root"] in html


def test_degraded_generic_with_known_tag_still_renders():
    html = render_block(make_generic_block("CardGrid", {}))
    assert DEFAULT_CLASS_NAMES[BlockTag.CARD_GRID]["grid"] in html


def test_text_is_escaped():
    html = render_block(HeroBlock(content=HeroContent(headline="<script>x</script>")))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_class_names_override_replaces_slot():
    hero = HeroBlock(content=HeroContent(headline="Hi"))
    html = render_block(hero, {"Hero": {"headline": "my-headline"}})
    assert 'class="my-headline"' in html
    assert DEFAULT_CLASS_NAMES[BlockTag.HERO]["headline"] not in html


def test_other_tag_styles_are_ignored():
    html = render_block(HeroBlock(), {"FAQ": {"root": "faq-only"}})
    assert "faq-only" not in html


# ── Vues ─────────────────────────────────────────────────────────────────────

def test_hero_background_adds_overlay():
    html = render_block({"type": "Hero", "content": {"headline": "H", "backgroundImage": "/bg.jpg",
                                                      "buttonText": "Go", "buttonLink": "/go"}})
    assert "background-image:url('/bg.jpg')" in html
    assert DEFAULT_CLASS_NAMES[BlockTag.HERO]["overlay"] in html
    assert 'href="/go"' in html


def test_card_grid_cards():
    html = render_block({"type": "CardGrid", "content": {"title": "Services", "cards": [
        {"title": "Fuite", "image": "/f.jpg", "image-alt": "Fuite d'eau", "link": "/fuite"},
    ]}})
    assert "Services" in html
    assert 'alt="Fuite d&#x27;eau"' in html
    assert "Learn more →" in html


def test_breadcrumbs_current_item():
    html = render_block({"type": "Breadcrumbs", "content": {"items": [
        {"label": "Home", "url": "/"},
        {"label": "Paris", "current": True},
    ]}})
    assert 'aria-label="Breadcrumb"' in html
    assert 'aria-current="page">Paris</span>' in html
    assert html.count(">/</span>") == 1


def test_how_it_works_numbers_steps_without_image():
    html = render_block({"type": "HowItWorks", "content": {"steps": [
        {"title": "Appel"}, {"title": "Devis", "image": "/d.png"}, {"title": "Travaux"},
    ]}})
    number_cls = DEFAULT_CLASS_NAMES[BlockTag.HOW_IT_WORKS]["stepNumber"]
    assert f'class="{number_cls}">1</div>' in html
    assert f'class="{number_cls}">3</div>' in html
    assert 'src="/d.png"' in html


def test_testimonials_stars():
    html = render_block({"type": "Testimonials", "content": {"items": [
        {"quote": "Super", "author": "Marie", "rating": 3, "eventType": "Réparation"},
    ]}})
    assert html.count(DEFAULT_CLASS_NAMES[BlockTag.TESTIMONIALS]["star"] + '"') == 3
    assert "Réparation" in html


def test_service_area_lists():
    html = render_block({"type": "ServiceAreaMap", "content": {
        "mapEmbedUrl": "https://maps.example/embed", "zipCodes": ["75015"], "neighborhoods": [],
    }})
    assert "<iframe" in html
    assert "Zip Codes" in html
    assert "Neighborhoods" not in html


def test_contact_overrides():
    overrides = BlockOverrides(contact=ContactOverrides(form_action="/send", on_submit=lambda: "track()"))
    html = render_block({"type": "Contact", "content": {
        "phone": "0102030405",
        "formFields": [{"label": "Your Name", "required": True}, {"label": "Message", "type": "textarea"}],
    }}, overrides=overrides)
    assert 'action="/send"' in html
    assert 'onsubmit="track()"' in html
    assert 'href="tel:0102030405"' in html
    assert "<textarea" in html
    assert 'name="your_name"' in html
    assert ">Submit</button>" in html


def test_contact_without_fields_has_no_form():
    assert "<form" not in render_block({"type": "Contact", "content": {"email": "a@b.fr"}})


def test_blog_body_is_raw_html_by_default():
    html = render_block({"type": "Blog", "content": {"title": "Post", "body": "<p>raw</p>", "readingTime": 5}})
    assert "<p>raw</p>" in html
    assert "5 min read" in html


def test_blog_render_body_override():
    overrides = BlockOverrides(blog=BlogOverrides(render_body=lambda md: f"<h2>{md.lstrip('# ')}</h2>"))
    html = render_block({"type": "Blog", "content": {"body": "# Intro"}}, overrides=overrides)
    assert "<h2>Intro</h2>" in html
    assert "# Intro" not in html


def test_blog_related_posts():
    html = render_block({"type": "Blog", "content": {"relatedPosts": [{"title": "Autre", "slug": "autre"}]}})
    assert "Related Posts" in html
    assert 'href="/autre"' in html


# ── Header / footer ──────────────────────────────────────────────────────────

def test_header_menu_sorted_and_filtered():
    html = render_header(_theme())
    assert html.index("Alpha") < html.index("Beta")
    assert "Hidden" not in html
    assert "Plomberie" in html


def test_header_sticky_and_cta():
    html = render_header(_theme())
    assert "sticky top-0 z-40" in html
    assert 'href="/devis"' in html
    assert "Devis gratuit" in html


def test_header_sticky_not_duplicated():
    theme = _theme(header={"sticky": True, "classNames": {"root": "sticky top-0 bg-white"}})
    assert "z-40" not in render_header(theme)


def test_header_active_link():
    html = render_header(_theme(), current_path="/alpha")
    assert 'aria-current="page"' in html


def test_footer_year_and_columns():
    html = render_footer(_theme(), year=2030)
    assert "© 2030 Acme" in html
    assert "Services" in html
    assert "Beta" not in html
    assert "Built with Pumpkin CMS" in html


def test_footer_built_with_url_from_env(monkeypatch):
    monkeypatch.setenv("PUMPKIN_BUILT_WITH_URL", "https://example.org/cms")
    assert 'href="https://example.org/cms"' in render_footer(_theme(), year=2030)


def test_footer_class_override():
    html = render_footer(_theme(footer={"classNames": {"root": "bg-pumpkin"}}), year=2030)
    assert 'class="bg-pumpkin"' in html


# ── Page complète ────────────────────────────────────────────────────────────

def test_metadata_falls_back_to_meta_data():
    meta = build_metadata(_page())
    assert meta["title"] == "Plombier Paris"
    assert meta["og"]["og:title"] == "Plombier Paris"
    assert meta["twitter"]["twitter:description"] == "Dépannage 24/7"


def test_metadata_prefers_seo():
    meta = build_metadata(_page(seo={"metaTitle": "SEO", "openGraph": {"og:title": "OG"}}))
    assert meta["title"] == "SEO"
    assert meta["og"]["og:title"] == "OG"
    assert meta["twitter"]["twitter:title"] == "OG"


def test_metadata_with_unexpected_seo_values():
    page = _page(seo={"keywords": "plombier, paris", "openGraph": "x",
                      "alternateUrls": [1, {"hrefLang": "en", "href": "/en"}]},
                 MetaData={"title": "T", "author": None, "language": 3})
    meta = build_metadata(page)
    assert meta["keywords"] == "plombier, paris"
    assert meta["alternates"] == [("en", "/en")]
    assert meta["og"]["og:title"] == "T"
    html = render_page(page)
    assert '<meta name="keywords" content="plombier, paris">' in html
    assert '<html lang="3">' in html


def test_render_page_document():
    page = _page([
        {"type": "Hero", "content": {"headline": "Fuite ?"}},
        {"type": "FAQ", "content": {}, "enabled": False},
        {"type": "TrustBar", "content": {}, "id": "confiance"},
        {"type": "Mystery", "content": {}},
    ], seo={"canonicalUrl": "https://ex.com/plombier-paris",
            "structuredData": {"@type": "LocalBusiness", "name": "</script>"}})
    html = render_page(page, theme=_theme())
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="fr-fr">' in html
    assert "<title>Plombier Paris</title>" in html
    assert '<link rel="canonical" href="https://ex.com/plombier-paris">' in html
    assert 'application/ld+json' in html
    assert "</script>\"" not in html
    assert '<section id="hero">' in html
    assert 'id="faq"' not in html
    assert '<section id="confiance">' in html
    assert "Mystery" not in html
    assert "<header" in html and "<footer" in html


def test_render_page_fallback_and_theme_styles():
    page = _page([{"type": "Hero", "content": {"headline": "H"}}, {"type": "Mystery", "content": {}}])
    theme = _theme(blockStyles={"Hero": {"root": "tenant-hero"}})
    html = render_page(page, theme=theme, fallback=lambda b: f"<p>Unknown block type: {b.type}</p>")
    assert 'class="tenant-hero"' in html
    assert "Unknown block type: Mystery" in html
    assert '<section id="mystery">' in html


def test_render_page_without_theme():
    html = render_page(_page([{"type": "Hero", "content": {"headline": "H"}}]))
    assert "<header" not in html
    assert '<section id="hero">' in html


# ── Sitemap ──────────────────────────────────────────────────────────────────

def test_sitemap():
    pages = [
        _page(PageId="a", pageSlug="plombier-paris", publishedAt="2024-03-05T10:00:00Z"),
        _page(PageId="b", pageSlug="a&b", MetaData={"updatedAt": "2024-01-02T00:00:00+00:00"}),
        _page(PageId="c", pageSlug="hidden", includeInSitemap=False),
    ]
    xml = build_sitemap_xml(pages, "https://ex.com/")
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
    assert "<loc>https://ex.com/plombier-paris</loc><lastmod>2024-03-05</lastmod>" in xml
    assert "<loc>https://ex.com/a&amp;b</loc><lastmod>2024-01-02</lastmod>" in xml
    assert "hidden" not in xml


def test_sitemap_bad_date_omits_lastmod():
    xml = build_sitemap_xml([_page(publishedAt="hier")], "https://ex.com")
    assert "<lastmod>" not in xml
    assert "<loc>https://ex.com/plombier-paris</loc>" in xml
