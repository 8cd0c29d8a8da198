"""Register a custom directive next to the builtin vocabulary.

``!highlight`` sets a background color on the following blocks; sections
and push/pop scope it like any builtin style directive.
"""

from typing import ClassVar

from stylemark import HtmlRenderer, builder as b, create_registry_with_defaults
from stylemark.nodes import Node
from stylemark.renderers.html import RenderContext


class HighlightDirective:
    names: ClassVar[tuple[str, ...]] = ("highlight",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        ctx.scope.set("background-color", node.args or "yellow")


registry = create_registry_with_defaults().register(HighlightDirective()).build()
renderer = HtmlRenderer(directive_registry=registry)

doc = b.document(
    b.directive("push"),
    b.directive("highlight"),
    b.paragraph(b.text("Highlighted.")),
    b.directive("pop"),
    b.directive("section", ".aside #note font-size: 0.9em;"),
    b.paragraph(b.text("Inside a section.")),
    b.directive("end"),
    b.directive("pop"),
)

print(renderer.render(doc))
for diagnostic in renderer.get_diagnostics():
    print("warning:", diagnostic)
