"""Tests for metadata block extraction."""

from __future__ import annotations

import pytest

from mdcorpus.models import Metadata
from mdcorpus.render.metadata import extract_metadata, parse_fields


class TestExtractMetadata:
    """Test extract_metadata."""

    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"# Title\n\nBody",
            b"--- not a block\n",
            b" ---\ntitle: x\n---\n",
            b"---",
            b"Intro\n---\ntitle: x\n---\n",
        ],
    )
    def test_no_leading_block_is_identity(self, content: bytes) -> None:
        """Content without a leading delimiter line is returned untouched."""
        metadata, body = extract_metadata(content)

        assert metadata == Metadata()
        assert body is content

    def test_title_and_author(self) -> None:
        """Should parse title and author and return the body."""
        content = b"---\ntitle: Getting Started\nauthor: Jane Doe\n---\n# Heading\n"

        metadata, body = extract_metadata(content)

        assert metadata == Metadata(title="Getting Started", author="Jane Doe")
        assert body == b"# Heading\n"

    def test_quotes_are_stripped(self) -> None:
        """Should remove one layer of matching quotes."""
        content = b"---\ntitle: \"Quoted: title\"\nauthor: 'Single'\n---\nBody"

        metadata, _ = extract_metadata(content)

        assert metadata.title == "Quoted: title"
        assert metadata.author == "Single"

    def test_only_one_layer_of_quotes(self) -> None:
        """Nested quotes keep the inner layer."""
        metadata, _ = extract_metadata(b"---\ntitle: \"'inner'\"\n---\n")

        assert metadata.title == "'inner'"

    def test_crlf_terminators(self) -> None:
        """Should handle carriage-return line endings."""
        content = b"---\r\nTitle: Windows\r\n---\r\nBody\r\n"

        metadata, body = extract_metadata(content)

        assert metadata.title == "Windows"
        assert body == b"Body\r\n"

    def test_keys_are_case_insensitive(self) -> None:
        """Should lower-case keys before matching."""
        metadata, _ = extract_metadata(b"---\n  AUTHOR :  Someone  \n---\n")

        assert metadata.author == "Someone"

    def test_unknown_keys_ignored(self) -> None:
        """Should ignore keys other than title and author."""
        content = b"---\ntags: a, b\ndate: 2024-01-01\ntitle: Kept\n---\nBody"

        metadata, body = extract_metadata(content)

        assert metadata == Metadata(title="Kept")
        assert body == b"Body"

    def test_unterminated_block(self) -> None:
        """Missing closing delimiter means no metadata at all."""
        content = b"---\ntitle: Never closed\n\n# Body\n"

        metadata, body = extract_metadata(content)

        assert metadata == Metadata()
        assert body is content

    def test_block_without_body(self) -> None:
        """A document holding only metadata yields an empty body."""
        metadata, body = extract_metadata(b"---\ntitle: Only\n---\n")

        assert metadata.title == "Only"
        assert body == b""

    def test_closing_delimiter_at_end_of_file(self) -> None:
        """Closing delimiter without a trailing newline is accepted."""
        metadata, body = extract_metadata(b"---\nauthor: Me\n---")

        assert metadata.author == "Me"
        assert body == b""

    def test_closing_must_be_exact(self) -> None:
        """A longer dash line does not close the block."""
        content = b"---\ntitle: A\n----\nmore\n---\nBody"

        metadata, body = extract_metadata(content)

        assert metadata.title == "A"
        assert body == b"Body"

    def test_empty_value_is_absent(self) -> None:
        """Empty values are reported as missing."""
        metadata, _ = extract_metadata(b"---\ntitle:\nauthor: \"\"\n---\n")

        assert metadata == Metadata()

    def test_lines_without_colon_skipped(self) -> None:
        """Lines that are not key/value pairs are ignored."""
        metadata, _ = extract_metadata(b"---\njust text\n\ntitle: T\n---\n")

        assert metadata.title == "T"


class TestParseFields:
    """Test parse_fields."""

    def test_splits_on_first_colon(self) -> None:
        """Values may contain colons."""
        fields = parse_fields([b"url: https://example.com"])

        assert fields == {"url": "https://example.com"}

    def test_invalid_utf8_is_replaced(self) -> None:
        """Undecodable bytes do not raise."""
        fields = parse_fields([b"title: caf\xe9"])

        assert fields["title"].startswith("caf")
