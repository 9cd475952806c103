"""Render a hand-built document tree in safe mode with source positions."""

from markwalk import (
    Document,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    SourceLocation,
    Text,
    render,
)

doc = Document(
    children=(
        Heading(level=1, children=(Text("Hello"),), location=SourceLocation(1, 1, 1, 7)),
        Paragraph(
            children=(
                Link("javascript:alert(1)", children=(Text("click me"),)),
                Text(" "),
                Image("data:image/png;base64,AAAA", children=(Text("pixel"),)),
            )
        ),
        List(items=(ListItem(children=(Paragraph(children=(Text("tight item"),)),)),)),
    )
)

print(render(doc, safe=True, sourcepos=True))
