from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentInput:
    """A user-supplied document whose text has already been extracted."""

    name: str
    content: str
    type: str


@dataclass(frozen=True)
class RawInputSet:
    """Everything the user entered before pressing submit."""

    documents: list[DocumentInput] = field(default_factory=list)
    blog_links: list[str] = field(default_factory=list)
    product_lines: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RequestPayload:
    """Bounded request sent to the analysis service."""

    documents: list[DocumentInput] = field(default_factory=list)
    blog_links: list[str] = field(default_factory=list)
    product_lines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Wire representation with the service's camelCase keys."""
        return {
            "documents": [
                {"name": doc.name, "content": doc.content, "type": doc.type}
                for doc in self.documents
            ],
            "blogLinks": list(self.blog_links),
            "productLines": list(self.product_lines),
        }
