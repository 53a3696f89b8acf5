import json

import pytest

from doctor.parser import DocCommentSerializer, parse

COMMENT = "/**\n * Summary {@code x}.\n * @param a the {@link\n * A}\n */"


@pytest.fixture
def serializer():
    return DocCommentSerializer()


def test_transfer_data_is_json_safe_and_keeps_offsets(serializer):
    data = serializer.to_transfer_data(parse(COMMENT))

    # Must survive a JSON round trip unchanged
    assert json.loads(json.dumps(data)) == data

    first = data["description"]["body_items"][0]
    assert first["kind"] == "text"
    assert first["text"]["text"] == "Summary "
    assert COMMENT[first["text"]["start"] : first["text"]["end"]] == "Summary "

    tag = data["block_tags"][0]
    assert tag["name"]["text"] == "param"
    inline = tag["body"][1]
    assert inline["kind"] == "inline_tag"
    assert [line["text"] for line in inline["body_lines"]] == ["", "A"]


def test_transfer_data_rebuilds_an_equal_tree(serializer):
    doc = parse(COMMENT)
    rebuilt = serializer.from_transfer_data(serializer.to_transfer_data(doc), COMMENT)

    assert rebuilt == doc
    assert rebuilt.block_tags[0].name.source is COMMENT


def test_transfer_data_rejects_a_different_buffer(serializer):
    data = serializer.to_transfer_data(parse(COMMENT))

    with pytest.raises(ValueError, match="does not match"):
        serializer.from_transfer_data(data, COMMENT.replace("Summary", "Summarx"))


def test_unknown_item_kind_is_rejected(serializer):
    data = {"description": {"body_items": [{"kind": "bogus"}]}, "block_tags": []}

    with pytest.raises(ValueError, match="bogus"):
        serializer.from_transfer_data(data, COMMENT)


def test_view_data(serializer):
    assert serializer.to_view_data(parse(COMMENT)) == {
        "description": [
            "Summary ",
            {"inline_tag": "code", "body_lines": ["x"]},
            ".\n",
        ],
        "block_tags": [
            {
                "name": "param",
                "body": [
                    "a the ",
                    {"inline_tag": "link", "body_lines": ["", "A"]},
                    "\n",
                ],
            }
        ],
    }


def test_view_data_without_description(serializer):
    assert serializer.to_view_data(parse("/**/")) == {
        "description": None,
        "block_tags": [],
    }
