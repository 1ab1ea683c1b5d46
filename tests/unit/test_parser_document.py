"""Tests for top-level document parsing."""

from pathlib import Path

import pytest

from apml.core import ir
from apml.core.dsl_parser_impl import parse_apml
from apml.core.errors import ParseError
from apml.core.parser import normalize_newlines, parse_file, parse_files


class TestDocument:
    """Tests for the document as a whole."""

    def test_feed_document(self, feed_document: ir.Document):
        assert feed_document.app.name == "feed"
        assert [m.name for m in feed_document.data] == ["Post", "User"]
        assert [i.name for i in feed_document.interfaces] == ["timeline"]
        assert [c.name for c in feed_document.computed] == ["total_likes", "share"]

    def test_declaration_order_preserved(self):
        doc = parse_apml(
            """
computed c1: 1
data B:
  x: text
interface home:
data A:
  y: text
computed c2: 2
"""
        )
        assert doc.declaration_order == [
            (ir.DeclarationKind.COMPUTED, "c1"),
            (ir.DeclarationKind.DATA, "B"),
            (ir.DeclarationKind.INTERFACE, "home"),
            (ir.DeclarationKind.DATA, "A"),
            (ir.DeclarationKind.COMPUTED, "c2"),
        ]
        assert [m.name for m in doc.data] == ["B", "A"]

    def test_empty_input(self):
        doc = parse_apml("")
        assert doc.is_empty
        assert doc.app is None

    def test_only_comments(self):
        doc = parse_apml("# nothing\n\n   # still nothing\n")
        assert doc.is_empty

    def test_unknown_construct_skipped_with_body(self):
        doc = parse_apml(
            """
theme dark:
  data Hidden:
    x: text
data Visible:
  y: text
"""
        )
        assert [m.name for m in doc.data] == ["Visible"]

    def test_keyword_only_recognised_at_column_zero(self):
        doc = parse_apml("  data Stray:\n    x: text\ndata Real:\n  y: text\n")
        assert [m.name for m in doc.data] == ["Real"]

    def test_duplicate_names_are_kept(self):
        doc = parse_apml("data A:\n  x: text\ndata A:\n  y: text\n")
        assert len(doc.data) == 2
        assert doc.get_data_model("A").fields[0].name == "x"

    def test_document_is_frozen(self, feed_document: ir.Document):
        with pytest.raises(Exception):
            feed_document.data = []


class TestAppAndShallowConstructs:
    """Tests for app metadata and the constructs that keep only names."""

    def test_app_metadata_unquoted(self):
        doc = parse_apml(
            """
app shop:
  title: "My Shop"
  description: 'Sells things'
  version: 1.2.0
  apml_version: 2.0.0-alpha.7
  theme: dark
"""
        )
        assert doc.app == ir.AppDeclaration(
            name="shop",
            title="My Shop",
            description="Sells things",
            version="1.2.0",
            apml_version="2.0.0-alpha.7",
        )

    def test_logic_body_consumed(self):
        doc = parse_apml(
            """
logic checkout:
  process pay:
    when total > 0:
      charge card
data Order:
  id: unique_id
"""
        )
        section = doc.logic[0]
        assert section.name == "checkout"
        assert section.processes == []
        assert section.calculations == []
        assert section.validations == []
        assert [m.name for m in doc.data] == ["Order"]

    def test_named_shallow_constructs(self):
        doc = parse_apml(
            """
state_machine OrderFlow:
  pending -> paid
realtime Chat:
  channel: rooms
external Stripe:
  key: env.STRIPE
"""
        )
        assert doc.state_machines == [ir.StateMachine(name="OrderFlow")]
        assert doc.realtime == [ir.RealtimeConnection(name="Chat")]
        assert doc.external == [ir.ExternalIntegration(name="Stripe")]

    def test_integrations(self):
        doc = parse_apml(
            """
integrations:
  payments:
    provider: stripe
  email sendgrid:
    key: x
"""
        )
        assert doc.integrations.sections == ["payments", "email"]
        assert doc.declaration_order == [(ir.DeclarationKind.INTEGRATIONS, "integrations")]

    def test_deploy(self):
        doc = parse_apml(
            """
deploy:
  platform: "vercel"
  environments:
    staging:
      url: s.example.com
    production:
      url: example.com
  regions: eu
"""
        )
        assert doc.deploy == ir.DeployConfig(
            platform="vercel", environments=["staging", "production"]
        )

    def test_malformed_shallow_header_is_fatal(self):
        with pytest.raises(ParseError):
            parse_apml("state_machine:\n  a -> b\n")


class TestParseErrors:
    """Error location and message."""

    def test_error_reports_line_and_raw_text(self):
        with pytest.raises(ParseError) as exc_info:
            parse_apml("app a:\n\n# comment\ndata :\n  x: text\n")
        err = exc_info.value
        assert err.message == "Invalid data declaration: 'data :'"
        assert err.context.line == 4
        assert err.context.column == 1
        assert "<input>:4:1" in str(err)

    def test_error_names_file(self):
        with pytest.raises(ParseError) as exc_info:
            parse_apml("interface:\n", Path("ui.apml"))
        assert str(exc_info.value).startswith("ui.apml:1:1")


class TestParseFile:
    """Reading sources from disk."""

    def test_crlf_is_normalised(self, write_apml):
        path = write_apml("data A:\r\n  x: text\r\n  y: number\r\n")
        doc = parse_file(path)
        assert [f.name for f in doc.data[0].fields] == ["x", "y"]

    def test_normalize_newlines(self):
        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_tabs_indent_body(self, write_apml):
        path = write_apml("data A:\n\tx: text\n\ty: number\n")
        doc = parse_file(path)
        assert [f.name for f in doc.data[0].fields] == ["x", "y"]

    def test_parse_files_keeps_order(self, write_apml):
        first = write_apml("data A:\n  x: text\n", "a.apml")
        second = write_apml("data B:\n  y: text\n", "b.apml")
        docs = parse_files([second, first])
        assert [d.data[0].name for d in docs] == ["B", "A"]
