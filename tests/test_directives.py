"""Tests for style directives, section arguments and the directive registry."""

from __future__ import annotations

import logging
from typing import ClassVar

import pytest

from stylemark import builder as b
from stylemark.config import RenderConfig
from stylemark.directives import (
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
    parse_section_args,
)
from stylemark.directives.builtins import StyleDirective
from stylemark.location import SourceLocation
from stylemark.nodes import Node
from stylemark.renderers.html import HtmlRenderer, RenderContext

POP_ERROR = '<div class="error">error: unbalanced &lt;code&gt;!pop&lt;/code&gt; directive</div>'
END_ERROR = '<div class="error">error: unbalanced &lt;code&gt;!end&lt;/code&gt; directive</div>'


class DepthProbe:
    """Records the scope depth and ambient style wherever it appears."""

    names: ClassVar[tuple[str, ...]] = ("probe",)

    def __init__(self) -> None:
        self.seen: list[tuple[int, dict[str, str]]] = []

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        self.seen.append((ctx.scope.depth, ctx.scope.styles))


def _renderer() -> tuple[HtmlRenderer, DepthProbe]:
    probe = DepthProbe()
    registry = create_registry_with_defaults().register(probe).build()
    return HtmlRenderer(RenderConfig(), directive_registry=registry), probe


def _render(*blocks) -> str:  # type: ignore[no-untyped-def]
    return HtmlRenderer(RenderConfig()).render(b.document(*blocks))


class TestSectionArgs:
    def test_classes_id_and_style(self) -> None:
        args = parse_section_args(".a.b #id color: red;")
        assert args.classes == ("a", "b")
        assert args.id == "id"
        assert args.styles == {"color": "red"}

    def test_empty_args(self) -> None:
        for raw in (None, "", "   "):
            args = parse_section_args(raw)
            assert args.classes == ()
            assert args.styles == {}
            assert args.id is None

    def test_last_id_wins(self) -> None:
        assert parse_section_args("#one #two").id == "two"

    def test_style_without_trailing_semicolon(self) -> None:
        args = parse_section_args("font-family: Times New Roman")
        assert args.styles == {"font-family": "Times New Roman"}

    def test_multiple_styles_and_overwrite(self) -> None:
        args = parse_section_args("color: red; font-size:2em; color: blue;")
        assert args.styles == {"color": "blue", "font-size": "2em"}

    def test_unrecognized_characters_are_skipped(self) -> None:
        args = parse_section_args("!! .note ?? #x")
        assert args.classes == ("note",)
        assert args.id == "x"

    def test_tokens_in_any_order(self) -> None:
        args = parse_section_args("#x color: red; .c")
        assert args.classes == ("c",)
        assert args.id == "x"
        assert args.styles == {"color": "red"}


class TestStyleDirectives:
    def test_color_applies_to_next_paragraph(self) -> None:
        html = _render(b.directive("color", "red"), b.paragraph(b.text("x")))
        assert html == '<p style="color:red;">x</p>\n'

    def test_all_style_properties(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.directive("background-color", "#eee"),
            b.directive("font-size", "12pt"),
            b.directive("font-family", "serif"),
            b.heading(1, b.text("x")),
        )
        assert 'style="color:red;background-color:#eee;font-size:12pt;font-family:serif;"' in html

    def test_directive_inside_paragraph_affects_following_blocks(self) -> None:
        html = _render(
            b.paragraph(b.text("a"), b.directive("color", "red"), b.text("b")),
            b.paragraph(b.text("c")),
        )
        assert html == '<p>ab</p>\n<p style="color:red;">c</p>\n'

    def test_style_applies_to_styled_blocks_only(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.thematic_break(),
            b.bullet_list(b.item(b.paragraph(b.text("i")))),
            b.code_block("x", "py"),
        )
        assert "<hr />" in html
        assert '<ul style="color:red;">' in html
        assert "<li>i</li>" in html
        assert '<pre><code style="color:red;" class="language-py">' in html

    def test_reset(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.directive("reset"),
            b.paragraph(b.text("x")),
        )
        assert html == "<p>x</p>\n"

    def test_style_value_is_escaped(self) -> None:
        html = _render(b.directive("color", 'red" onclick="x'), b.paragraph(b.text("x")))
        assert 'style="color:red&quot; onclick=&quot;x;"' in html

    def test_unknown_directive_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="stylemark"):
            html = _render(b.directive("sparkle", "on"), b.paragraph(b.text("x")))
        assert html == "<p>x</p>\n"
        assert "sparkle" in caplog.text


class TestPushPop:
    def test_pop_restores_pushed_style(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.directive("push"),
            b.directive("color", "blue"),
            b.paragraph(b.text("x")),
            b.directive("pop"),
            b.paragraph(b.text("y")),
        )
        assert html == '<p style="color:blue;">x</p>\n<p style="color:red;">y</p>\n'

    def test_nested_push_pop(self) -> None:
        renderer, probe = _renderer()
        renderer.render(
            b.document(
                b.directive("color", "red"),
                b.directive("push"),
                b.directive("font-size", "2em"),
                b.directive("push"),
                b.directive("reset"),
                b.directive("probe"),
                b.directive("pop"),
                b.directive("probe"),
                b.directive("pop"),
                b.directive("probe"),
            )
        )
        assert probe.seen == [
            (2, {}),
            (1, {"color": "red", "font-size": "2em"}),
            (0, {"color": "red"}),
        ]

    def test_unbalanced_pop_reports_error(self) -> None:
        html = _render(b.directive("pop"), b.paragraph(b.text("a")))
        assert html == POP_ERROR + "\n<p>a</p>\n"

    def test_unbalanced_pop_leaves_style_unchanged(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.directive("pop"),
            b.paragraph(b.text("a")),
        )
        assert html.count('class="error"') == 1
        assert '<p style="color:red;">a</p>' in html

    def test_pop_does_not_close_section(self) -> None:
        renderer, probe = _renderer()
        html = renderer.render(
            b.document(
                b.directive("push"),
                b.directive("section"),
                b.directive("pop"),
                b.directive("end"),
                b.directive("pop"),
                b.directive("probe"),
            )
        )
        assert html.count('class="error"') == 1
        assert [d.directive for d in renderer.get_diagnostics()] == ["pop"]
        assert probe.seen == [(0, {})]


class TestSections:
    def test_section_and_end(self) -> None:
        html = _render(
            b.directive("color", "green"),
            b.directive("section", ".a.b #id color: red;"),
            b.paragraph(b.text("p")),
            b.directive("end"),
            b.paragraph(b.text("q")),
        )
        assert html == (
            '<div class="a b" id="id" style="color:red;">\n'
            "<p>p</p>\n"
            "</div>\n"
            '<p style="color:green;">q</p>\n'
        )

    def test_section_inherits_ambient_style(self) -> None:
        html = _render(
            b.directive("color", "green"),
            b.directive("section", "font-size: 2em;"),
            b.directive("end"),
        )
        assert html == '<div style="color:green;font-size:2em;"></div>'

    def test_section_without_args(self) -> None:
        assert _render(b.directive("section"), b.directive("end")) == "<div></div>"

    def test_section_clears_ambient_style(self) -> None:
        renderer, probe = _renderer()
        renderer.render(
            b.document(
                b.directive("color", "red"),
                b.directive("section"),
                b.directive("probe"),
                b.directive("end"),
                b.directive("probe"),
            )
        )
        assert probe.seen == [(1, {}), (0, {"color": "red"})]

    def test_end_discards_unpopped_pushes(self) -> None:
        renderer, probe = _renderer()
        html = renderer.render(
            b.document(
                b.directive("section"),
                b.directive("push"),
                b.directive("color", "red"),
                b.directive("push"),
                b.directive("end"),
                b.directive("probe"),
                b.paragraph(b.text("x")),
            )
        )
        assert html == "<div></div>\n<p>x</p>\n"
        assert probe.seen == [(0, {})]
        assert renderer.get_diagnostics() == []

    def test_nested_sections(self) -> None:
        html = _render(
            b.directive("section", ".outer"),
            b.directive("section", ".inner"),
            b.directive("end"),
            b.directive("end"),
        )
        assert html == '<div class="outer">\n<div class="inner"></div></div>'

    def test_unbalanced_end(self) -> None:
        renderer = HtmlRenderer(RenderConfig())
        loc = SourceLocation(4, 1, 4, 4)
        html = renderer.render(b.document(b.directive("end", sourcepos=loc)))
        assert html == END_ERROR
        [diagnostic] = renderer.get_diagnostics()
        assert diagnostic.directive == "end"
        assert diagnostic.location == loc
        assert str(diagnostic) == "4:1: !end: unbalanced !end directive"

    def test_end_inside_block_quote_does_not_close_outer_section(self) -> None:
        renderer = HtmlRenderer(RenderConfig())
        html = renderer.render(
            b.document(
                b.directive("section", ".outer"),
                b.block_quote(b.paragraph(b.directive("end"), b.text("q"))),
                b.directive("end"),
            )
        )
        assert html.count('class="error"') == 1
        assert html.endswith("</blockquote>\n</div>")
        assert [d.directive for d in renderer.get_diagnostics()] == ["end"]

    def test_unbalanced_directive_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="stylemark"):
            _render(b.directive("pop"))
        assert "unbalanced !pop directive" in caplog.text


class TestBlockQuoteScope:
    def test_quote_takes_outer_style_and_content_starts_clean(self) -> None:
        html = _render(
            b.directive("color", "red"),
            b.block_quote(b.paragraph(b.text("q"))),
            b.paragraph(b.text("after")),
        )
        assert html == (
            '<blockquote style="color:red;">\n'
            "<p>q</p>\n"
            "</blockquote>\n"
            '<p style="color:red;">after</p>\n'
        )

    def test_quote_discards_unmatched_pushes(self) -> None:
        renderer, probe = _renderer()
        html = renderer.render(
            b.document(
                b.block_quote(
                    b.paragraph(b.directive("push"), b.directive("color", "blue"), b.text("q")),
                ),
                b.directive("probe"),
                b.paragraph(b.text("after")),
            )
        )
        assert html.endswith("<p>after</p>\n")
        assert probe.seen == [(0, {})]

    def test_style_set_inside_quote_does_not_leak(self) -> None:
        html = _render(
            b.block_quote(b.directive("color", "blue"), b.paragraph(b.text("q"))),
            b.paragraph(b.text("after")),
        )
        assert '<p style="color:blue;">q</p>' in html
        assert html.endswith("<p>after</p>\n")


class TestRegistry:
    def test_default_registry_names(self) -> None:
        registry = create_default_registry()
        assert registry.names == frozenset(
            {
                "color",
                "background-color",
                "font-size",
                "font-family",
                "reset",
                "push",
                "pop",
                "section",
                "end",
            }
        )
        assert "push" in registry
        assert registry.get("nope") is None

    def test_default_registry_is_cached(self) -> None:
        assert create_default_registry() is create_default_registry()

    def test_duplicate_name_rejected(self) -> None:
        builder = create_registry_with_defaults()
        with pytest.raises(ValueError, match="already registered"):
            builder.register(StyleDirective())

    def test_handler_without_names_rejected(self) -> None:
        class Nameless:
            def apply(self, node, renderer, ctx):  # type: ignore[no-untyped-def]
                pass

        with pytest.raises(TypeError, match="names"):
            DirectiveRegistryBuilder().register(Nameless())  # type: ignore[arg-type]

    def test_handler_without_apply_rejected(self) -> None:
        class Inert:
            names = ("inert",)

        with pytest.raises(TypeError, match="apply"):
            DirectiveRegistryBuilder().register(Inert())  # type: ignore[arg-type]

    def test_custom_directive(self) -> None:
        class Highlight:
            names: ClassVar[tuple[str, ...]] = ("highlight",)

            def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
                ctx.scope.set("background-color", node.args or "yellow")

        registry = create_registry_with_defaults().register(Highlight()).build()
        html = HtmlRenderer(RenderConfig(), directive_registry=registry).render(
            b.document(b.directive("highlight"), b.paragraph(b.text("x")))
        )
        assert html == '<p style="background-color:yellow;">x</p>\n'
