"""Render a hand-built tree with a style directive — zero config, zero deps."""

from stylemark import builder as b, render

doc = b.document(
    b.directive("color", "darkred"),
    b.heading(1, b.text("Hello "), b.strong(b.text("World"))),
    b.paragraph(b.text("Styled by the ambient color.")),
)
print(render(doc))
