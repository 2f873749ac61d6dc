# tests/test_blob.py
"""Tests for ghsync.models.blob front-matter handling and mime sniffing."""

import pytest

from ghsync.models.blob import OCTET_STREAM, TEXT_PLAIN, Blob, sniff_mimetype

pytestmark = pytest.mark.tier1


class TestSniffMimetype:
    def test_utf8_text(self):
        assert sniff_mimetype("héllo\n".encode("utf-8")) == TEXT_PLAIN

    def test_nul_byte_is_binary(self):
        assert sniff_mimetype(b"GIF89a\x00\x01") == OCTET_STREAM

    def test_invalid_utf8_is_binary(self):
        assert sniff_mimetype(b"\xff\xfe\xfa") == OCTET_STREAM

    def test_from_bytes_binary_has_no_content(self):
        blob = Blob.from_bytes("img/logo.png", "s1", b"\x89PNG\x00\x00")
        assert blob.mimetype == OCTET_STREAM
        assert blob.content == ""
        assert not blob.has_frontmatter()


class TestPathProperties:
    def test_extension_is_lowercase_without_dot(self):
        assert Blob("posts/Hello.MD", "s").file_extension == "md"

    def test_no_extension(self):
        assert Blob("Makefile", "s").file_extension == ""

    def test_name(self):
        assert Blob("a/b/c.md", "s").name == "c.md"


class TestFrontmatter:
    def test_parses_mapping_and_strips_block(self):
        blob = Blob("p.md", "s", "---\nlayout: post\npublished: true\n---\n\nBody text\n")

        assert blob.has_frontmatter()
        assert blob.meta() == {"layout": "post", "published": True}
        assert blob.content_import() == "Body text\n"

    def test_meta_returns_fresh_copy(self):
        blob = Blob("p.md", "s", "---\ntitle: x\n---\nbody")
        blob.meta().pop("title")
        assert blob.meta() == {"title": "x"}

    def test_empty_block_is_empty_mapping(self):
        blob = Blob("p.md", "s", "---\n---\nbody")
        assert blob.meta() == {}
        assert blob.content_import() == "body"

    def test_no_frontmatter(self):
        blob = Blob("p.md", "s", "# Title\n\nbody")
        assert blob.meta() is None
        assert not blob.has_frontmatter()
        assert blob.content_import() == "# Title\n\nbody"

    def test_delimiter_must_start_the_file(self):
        blob = Blob("p.md", "s", "intro\n---\na: 1\n---\n")
        assert blob.meta() is None

    def test_invalid_yaml_keeps_whole_content(self):
        content = "---\nkey: [unclosed\n---\nbody"
        blob = Blob("p.md", "s", content)
        assert blob.meta() is None
        assert blob.content_import() == content

    def test_non_mapping_root_is_ignored(self):
        content = "---\n- a\n- b\n---\nbody"
        blob = Blob("p.md", "s", content)
        assert blob.meta() is None
        assert blob.content_import() == content

    def test_crlf_line_endings(self):
        blob = Blob("p.md", "s", "---\r\nlayout: page\r\n---\r\nbody")
        assert blob.meta() == {"layout": "page"}
        assert blob.content_import() == "body"

    def test_blobs_compare_by_identity_fields(self):
        a = Blob("p.md", "s", "---\na: 1\n---\n")
        b = Blob("p.md", "s", "---\na: 1\n---\n")
        a.meta()
        assert a == b
