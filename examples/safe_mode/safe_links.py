"""Safe mode drops script-capable destinations and raw HTML."""

from stylemark import builder as b, render

doc = b.document(
    b.paragraph(
        b.link("javascript:alert(1)", b.text("no href")),
        b.text(" "),
        b.link("data:image/png;base64,iVBORw0KGgo=", b.text("inline png")),
        b.text(" "),
        b.image("javascript:alert(1)", b.text("alt & text"), title="kept"),
        b.html_inline("<script>alert(1)</script>"),
    ),
)

print(render(doc, safe=True))
