from typing import Any, Dict, List, Optional

from doctor.syntax import (
    BlockTag,
    BodyItem,
    Description,
    DocComment,
    DocCommentSerializerProtocol,
    InlineTag,
    Span,
    TextSegment,
)

TEXT_KIND = "text"
INLINE_TAG_KIND = "inline_tag"


class DocCommentSerializer(DocCommentSerializerProtocol):
    # --- Transfer data: JSON-safe, keeps offsets ---
    def _encode_span(self, span: Span) -> Dict[str, Any]:
        return {"text": span.text, "start": span.start, "end": span.end}

    def _decode_span(self, data: Dict[str, Any], source: str) -> Span:
        span = Span(source, data["start"], data["end"])
        if span.text != data["text"]:
            raise ValueError(
                f"Span {data['start']}:{data['end']} does not match the source buffer: "
                f"expected {data['text']!r}, found {span.text!r}"
            )
        return span

    def _encode_item(self, item: BodyItem) -> Dict[str, Any]:
        if isinstance(item, TextSegment):
            return {"kind": TEXT_KIND, "text": self._encode_span(item.text)}
        return {
            "kind": INLINE_TAG_KIND,
            "name": self._encode_span(item.name),
            "body_lines": [self._encode_span(line) for line in item.body_lines],
        }

    def _decode_item(self, data: Dict[str, Any], source: str) -> BodyItem:
        kind = data.get("kind")
        if kind == TEXT_KIND:
            return TextSegment(self._decode_span(data["text"], source))
        if kind == INLINE_TAG_KIND:
            return InlineTag(
                name=self._decode_span(data["name"], source),
                body_lines=tuple(
                    self._decode_span(line, source) for line in data.get("body_lines", [])
                ),
            )
        raise ValueError(f"Unknown body item kind: {kind!r}")

    def to_transfer_data(self, doc: DocComment) -> Dict[str, Any]:
        description: Optional[Dict[str, Any]] = None
        if doc.description is not None:
            description = {
                "body_items": [self._encode_item(i) for i in doc.description.body_items]
            }
        return {
            "description": description,
            "block_tags": [
                {
                    "name": self._encode_span(tag.name),
                    "body": [self._encode_item(i) for i in tag.body],
                }
                for tag in doc.block_tags
            ],
        }

    def from_transfer_data(self, data: Dict[str, Any], source: str) -> DocComment:
        description = None
        if data.get("description") is not None:
            description = Description(
                body_items=tuple(
                    self._decode_item(i, source)
                    for i in data["description"].get("body_items", [])
                )
            )
        block_tags = tuple(
            BlockTag(
                name=self._decode_span(tag["name"], source),
                body=tuple(self._decode_item(i, source) for i in tag.get("body", [])),
            )
            for tag in data.get("block_tags", [])
        )
        return DocComment(description=description, block_tags=block_tags)

    # --- View data: text only, for humans ---
    def _view_items(self, items: Any) -> List[Any]:
        view: List[Any] = []
        for item in items:
            if isinstance(item, TextSegment):
                view.append(item.text.text)
            else:
                view.append(
                    {
                        "inline_tag": item.name.text,
                        "body_lines": [line.text for line in item.body_lines],
                    }
                )
        return view

    def to_view_data(self, doc: DocComment) -> Any:
        return {
            "description": (
                self._view_items(doc.description.body_items)
                if doc.description is not None
                else None
            ),
            "block_tags": [
                {"name": tag.name.text, "body": self._view_items(tag.body)}
                for tag in doc.block_tags
            ],
        }
