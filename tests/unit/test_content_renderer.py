"""Tests for deterministic block renderer."""

from newsdesk.schemas.blocks import (
    CtaBlock,
    HeadingBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
)
from newsdesk.services.content_renderer import render_blocks_to_html


def test_renderer_maps_blocks_to_tagged_html() -> None:
    blocks = [
        HeadingBlock(level="h2", text="What to Look For"),
        ParagraphBlock(text="Prioritize **speed**\nand integrations."),
        QuoteBlock(text="Line one\nLine two", author="Ada"),
        ListBlock(style="ordered", items=["First", "Second"]),
        ImageBlock(url="https://cdn.example.com/a.png", caption="Office", alt="Open space"),
        CtaBlock(title="Try it", description="Start in 5 minutes.", button_label="Go", button_url="/pricing"),
    ]

    html = render_blocks_to_html(blocks)

    assert html.split("\n") == [
        '<h2 data-block="heading" data-level="h2" class="article-heading">What to Look For</h2>',
        '<p data-block="paragraph" class="article-paragraph">'
        "Prioritize <strong>speed</strong><br />and integrations.</p>",
        '<blockquote data-block="quote" class="article-quote"><p>Line one<br />Line two</p>'
        '<footer class="article-quote-author">Ada</footer></blockquote>',
        '<ol data-block="list" data-style="ordered" class="article-list"><li>First</li><li>Second</li></ol>',
        '<figure data-block="image" class="article-image">'
        '<img src="https://cdn.example.com/a.png" alt="Open space" /><figcaption>Office</figcaption></figure>',
        '<section data-block="cta" class="article-cta"><h3>Try it</h3><p>Start in 5 minutes.</p>'
        '<a class="cta-button" href="/pricing">Go</a></section>',
    ]


def test_renderer_skips_empty_blocks() -> None:
    assert render_blocks_to_html([ParagraphBlock(text="   ")]) == ""
    assert render_blocks_to_html([ListBlock(items=["", ""])]) == ""
    assert render_blocks_to_html([HeadingBlock(text=" ")]) == ""
    assert render_blocks_to_html([QuoteBlock(text="", author="Ada")]) == ""
    assert render_blocks_to_html([ImageBlock(url="  ", caption="Lost")]) == ""
    assert render_blocks_to_html([CtaBlock(button_url="/only-url")]) == ""


def test_renderer_joins_non_empty_blocks_with_newlines() -> None:
    html = render_blocks_to_html(
        [ParagraphBlock(text="One"), ParagraphBlock(text=""), ParagraphBlock(text="Two")]
    )

    assert html == (
        '<p data-block="paragraph" class="article-paragraph">One</p>\n'
        '<p data-block="paragraph" class="article-paragraph">Two</p>'
    )


def test_heading_is_single_line_formatted() -> None:
    html = render_blocks_to_html([HeadingBlock(level="h3", text="A\nB")])

    assert html == '<h3 data-block="heading" data-level="h3" class="article-heading">A\nB</h3>'
    assert "<br />" not in html


def test_list_drops_blank_items() -> None:
    html = render_blocks_to_html([ListBlock(items=[" a ", "", "  ", "b"])])

    assert html == '<ul data-block="list" data-style="unordered" class="article-list"><li>a</li><li>b</li></ul>'


def test_image_alt_falls_back_to_caption_then_placeholder() -> None:
    with_caption = render_blocks_to_html([ImageBlock(url="/x.png", caption="Cap")])
    bare = render_blocks_to_html([ImageBlock(url="/x.png")])

    assert '<img src="/x.png" alt="Cap" />' in with_caption
    assert bare == '<figure data-block="image" class="article-image"><img src="/x.png" alt="image" /></figure>'


def test_cta_button_requires_label_and_url() -> None:
    html = render_blocks_to_html([CtaBlock(title="T", description="D", button_label="Go")])

    assert html == '<section data-block="cta" class="article-cta"><h3>T</h3><p>D</p></section>'


def test_renderer_escapes_user_content() -> None:
    html = render_blocks_to_html(
        [
            ParagraphBlock(text="<script>alert('x')</script>"),
            ImageBlock(url='/a.png" onerror="x', alt="a"),
        ]
    )

    assert "<script>" not in html
    assert "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;" in html
    assert 'src="/a.png&quot; onerror=&quot;x"' in html


def test_renderer_skips_unknown_blocks_and_accepts_mappings() -> None:
    html = render_blocks_to_html(
        [
            {"type": "video", "src": "clip.mp4"},
            object(),
            {"type": "paragraph", "text": "From storage"},
        ]
    )

    assert html == '<p data-block="paragraph" class="article-paragraph">From storage</p>'


def test_cta_with_only_a_button_label_renders_nothing() -> None:
    assert render_blocks_to_html([CtaBlock(button_label="Go", button_url="")]) == ""
    assert render_blocks_to_html([CtaBlock(button_label="Go", button_url="/go")]) == (
        '<section data-block="cta" class="article-cta"><a class="cta-button" href="/go">Go</a></section>'
    )
