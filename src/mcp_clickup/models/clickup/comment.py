"""
ClickUp comment models.

This module provides Pydantic models for the structured comment format
ClickUp uses for task comments: a list of text blocks, each with optional
formatting attributes.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field, PrivateAttr

from ..base import ApiModel
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class CommentLink(ApiModel):
    url: str


class CodeBlock(ApiModel):
    """
    The `code-block` attribute of a comment block.

    ClickUp nests the language under a key of the same name:
    ``{"code-block": {"code-block": "python"}}``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    language: str = Field(
        default="plain",
        alias="code-block",
        description="Programming language for syntax highlighting",
    )


class CommentAttributes(ApiModel):
    """
    Model representing the formatting attributes of a comment block.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    code: bool | None = None
    color: str | None = None
    background_color: str | None = None
    link: CommentLink | None = None
    code_block: CodeBlock | None = Field(default=None, alias="code-block")


class CommentBlock(ApiModel):
    """
    Model representing one block of a structured ClickUp comment.
    """

    model_config = ConfigDict(extra="allow")

    text: str = EMPTY_STRING
    attributes: CommentAttributes | None = None

    # Attributes ClickUp sent that do not validate, returned as received
    _raw_attributes: dict[str, Any] | None = PrivateAttr(default=None)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CommentBlock":
        """
        Create a CommentBlock from a ClickUp comment block.

        Unknown keys and attributes are kept. Attributes that fail validation
        are kept as received and only their `code-block` is interpreted.

        Args:
            data: A block of a comment's `comment` array

        Returns:
            A CommentBlock instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        attributes = None
        raw_attributes = None
        attributes_data = data.get("attributes")
        if isinstance(attributes_data, dict):
            try:
                attributes = CommentAttributes.model_validate(attributes_data)
            except ValueError as e:
                logger.debug(f"Keeping unrecognised comment attributes as sent: {e}")
                attributes = CommentAttributes(
                    code_block=_code_block_from(attributes_data)
                )
                raw_attributes = dict(attributes_data)

        extra = {k: v for k, v in data.items() if k not in ("text", "attributes")}
        text = data.get("text")
        block = cls(
            text=str(text) if text is not None else EMPTY_STRING,
            attributes=attributes,
            **extra,
        )
        block._raw_attributes = raw_attributes
        return block

    @property
    def code_language(self) -> str | None:
        """Language of the block's code-block attribute, None for other blocks."""
        if self.attributes is None or self.attributes.code_block is None:
            return None
        return self.attributes.code_block.language

    @property
    def is_separator(self) -> bool:
        """True for an empty block without attributes."""
        if self.text != EMPTY_STRING:
            return False
        if self._raw_attributes:
            return False
        return self.attributes is None or not self.attributes.model_dump(
            exclude_none=True
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the block dictionary ClickUp accepts."""
        result = self.model_dump(by_alias=True, exclude_none=True)
        if self._raw_attributes is not None:
            result["attributes"] = dict(self._raw_attributes)
        return result


def _code_block_from(attributes_data: dict[str, Any]) -> CodeBlock | None:
    code_block = attributes_data.get("code-block")
    if not isinstance(code_block, dict):
        return None
    try:
        return CodeBlock.model_validate(code_block)
    except ValueError:
        return None
