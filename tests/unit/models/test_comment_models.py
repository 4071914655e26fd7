"""Tests for the ClickUp comment models."""

from mcp_clickup.models.clickup import CodeBlock, CommentAttributes, CommentBlock


class TestCommentBlock:
    """Tests for the CommentBlock model."""

    def test_from_api_response(self, comment_blocks_data):
        block = CommentBlock.from_api_response(comment_blocks_data[3])

        assert block.text == "x = 1"
        assert block.code_language == "python"
        assert block.is_separator is False

    def test_empty_attributes(self, comment_blocks_data):
        block = CommentBlock.from_api_response(comment_blocks_data[0])
        assert block.attributes == CommentAttributes()
        assert block.code_language is None
        assert block.to_simplified_dict() == {"text": "See ", "attributes": {}}

    def test_invalid_attributes_are_kept_as_sent(self):
        data = {"text": "hi", "attributes": {"link": "not-a-link-object"}}
        block = CommentBlock.from_api_response(data)

        assert block.text == "hi"
        assert block.code_language is None
        assert block.is_separator is False
        assert block.to_simplified_dict() == data

    def test_invalid_attributes_keep_code_language(self):
        data = {
            "text": "x",
            "attributes": {"code-block": {"code-block": "js"}, "color": 5},
        }
        block = CommentBlock.from_api_response(data)

        assert block.code_language == "js"
        assert block.to_simplified_dict() == data

    def test_unknown_keys_are_kept(self):
        data = {
            "text": "item\n",
            "type": "paragraph",
            "attributes": {"list": {"list": "bullet"}, "bold": True},
        }
        assert CommentBlock.from_api_response(data).to_simplified_dict() == data

    def test_non_dict_data(self):
        assert CommentBlock.from_api_response(None) == CommentBlock()

    def test_code_block_default_language(self):
        block = CommentBlock.model_validate({"text": "x", "attributes": {"code-block": {}}})
        assert block.code_language == "plain"

    def test_code_block_populated_by_name(self):
        attributes = CommentAttributes(code_block=CodeBlock(language="go"))
        assert CommentBlock(text="x", attributes=attributes).code_language == "go"

    def test_is_separator(self):
        assert CommentBlock().is_separator is True
        assert CommentBlock(attributes=CommentAttributes()).is_separator is True
        assert CommentBlock(text="\n").is_separator is False
        assert (
            CommentBlock(attributes=CommentAttributes(bold=True)).is_separator is False
        )

    def test_to_simplified_dict_uses_aliases(self):
        block = CommentBlock.model_validate(
            {
                "text": "echo 1",
                "attributes": {"bold": True, "code-block": {"code-block": "bash"}},
            }
        )

        assert block.to_simplified_dict() == {
            "text": "echo 1",
            "attributes": {"bold": True, "code-block": {"code-block": "bash"}},
        }
