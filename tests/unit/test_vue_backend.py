"""Tests for the Vue backend and the backend registry."""

import logging

import pytest

from apml.core import ir
from apml.core.dsl_parser_impl import parse_apml
from apml.core.errors import BackendError
from apml.stacks import Backend, BackendRegistry, get_backend, list_backends
from apml.stacks.base import GeneratedFile
from apml.stacks.vue import VueBackend, VueGenerator
from apml.stacks.vue.components import html_tag, render_properties
from apml.stacks.vue.expressions import computed_body, to_javascript, to_vue_condition
from apml.stacks.vue.store import collection_name
from apml.stacks.vue.types import ts_type


def _files(doc: ir.Document) -> dict[str, str]:
    return {f.path: f.content for f in VueBackend().generate(doc)}


class TestRegistry:
    """Tests for backend lookup."""

    def test_vue_is_builtin(self):
        assert "vue" in list_backends()
        assert isinstance(get_backend("vue"), VueBackend)

    def test_unknown_backend(self):
        with pytest.raises(BackendError) as exc_info:
            get_backend("svelte")
        assert "Backend 'svelte' not found" in str(exc_info.value)

    def test_duplicate_registration(self):
        registry = BackendRegistry()
        registry.register("vue", VueBackend)
        with pytest.raises(BackendError):
            registry.register("vue", VueBackend)

    def test_register_requires_backend_subclass(self):
        registry = BackendRegistry()
        with pytest.raises(BackendError):
            registry.register("bogus", dict)

    def test_custom_backend(self):
        class EchoBackend(Backend):
            def generate(self, document, **options):
                names = " ".join(m.name for m in document.data)
                return [GeneratedFile(path="names.txt", content=names)]

        registry = BackendRegistry()
        registry.register("echo", EchoBackend)
        files = registry.get("echo").generate(parse_apml("data A:\n  x: text\n"))
        assert files == [GeneratedFile(path="names.txt", content="A")]
        assert registry.get("echo").get_capabilities().name == "EchoBackend"

    def test_capabilities(self):
        caps = VueBackend().get_capabilities()
        assert caps.name == "vue"
        assert caps.output_formats == ["vue", "ts"]


class TestExpressions:
    """Tests for APML to JavaScript expression text conversion."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("a equals b", "a === b"),
            ("status not equals done", "status !== done"),
            ("a and b", "a && b"),
            ("a or b", "a || b"),
            ("a equals b and not c", "a === b && !c"),
            ("count > 0", "count > 0"),
        ],
    )
    def test_to_javascript(self, source, expected):
        assert to_javascript(source) == expected

    def test_condition_leading_not_and_camel_case(self):
        assert to_vue_condition("not is_open") == "!isOpen"
        assert to_vue_condition('current_tab equals "home"') == 'currentTab === "home"'
        assert to_vue_condition("(not is_open)") == "(!isOpen)"

    def test_computed_body(self):
        assert computed_body(None) == "return null; // No expression provided"
        assert computed_body("a and b") == "return a && b;"
        assert computed_body("items.map(i => i.id)") == "return items.map(i => i.id);"
        assert computed_body("function(x) { return x }") == "return function(x) { return x };"
        assert computed_body("ok ? a => a : b and c") == "return ok ? a => a : b && c;"


class TestTypes:
    """Tests for the TypeScript model file."""

    def test_ts_type(self):
        assert ts_type(ir.FieldType.of_primitive(ir.PrimitiveType.MONEY)) == "number"
        assert ts_type(ir.FieldType.of_primitive(ir.PrimitiveType.TIMESTAMP)) == "Date"
        assert ts_type(ir.FieldType.reference("User")) == "User"
        nested = ir.FieldType.list_of(ir.FieldType.list_of(ir.FieldType.reference("Cell")))
        assert ts_type(nested) == "Cell[][]"

    def test_models_file(self, feed_document):
        content = _files(feed_document)["src/types/models.ts"]
        assert "export interface Post {" in content
        assert "  id: string;" in content
        assert "  author: User;" in content
        assert "  tags?: string[];" in content
        assert "  likes: number;" in content
        assert "export interface User {" in content

    def test_no_models_no_file(self):
        assert "src/types/models.ts" not in _files(parse_apml("computed x: 1\n"))


class TestStore:
    """Tests for the Pinia store."""

    def test_collection_name(self):
        assert collection_name("Post") == "posts"
        assert collection_name("Status") == "status"
        assert collection_name("BlogEntry") == "blogEntrys"

    def test_store_file(self, feed_document):
        content = _files(feed_document)["src/stores/app.ts"]
        assert "import type { Post, User } from '../types/models';" in content
        assert "  const posts = ref<Post[]>([]);" in content
        assert "  const users = ref<User[]>([]);" in content
        assert "  const total_likes = computed(() => {" in content
        assert "    return posts.length && ready;" in content
        assert "    return total_likes / 100;" in content
        assert "    posts,\n    users,\n    total_likes,\n    share,\n  };" in content

    def test_store_without_models_skips_type_import(self):
        content = _files(parse_apml("computed x: 1\n"))["src/stores/app.ts"]
        assert "../types/models" not in content
        assert "    return 1;" in content

    def test_empty_document_generates_nothing(self):
        assert _files(parse_apml("")) == {}

    def test_computed_without_expression_warns(self):
        result = VueGenerator(parse_apml("computed pending:\n")).generate()
        assert result.warnings == ["Computed value 'pending' has no expression; it will be null"]
        store = {f.path: f.content for f in result.files}["src/stores/app.ts"]
        assert "return null; // No expression provided" in store

    def test_backend_logs_generator_warnings(self, caplog):
        with caplog.at_level(logging.WARNING, logger="apml.stacks.vue"):
            VueBackend().generate(parse_apml("computed pending:\n"))
        assert "Computed value 'pending' has no expression" in caplog.text


class TestComponents:
    """Tests for single-file components."""

    @pytest.mark.parametrize(
        "name, tag",
        [
            ("header", "header"),
            ("nav_tab", "button"),
            ("tab", "button"),
            ("data_table", "table"),
            ("like_button", "button"),
            ("post_card", "div"),
            ("Footer", "footer"),
        ],
    )
    def test_html_tag(self, name, tag):
        assert html_tag(name) == tag

    def test_render_properties(self):
        attributes, text = render_properties(
            {
                "text": '"Hello"',
                "active": "selected_tab equals 1",
                "src": "logo.png",
                "icon": "'star'",
                "on_click": "go()",
                "color": "red",
            }
        )
        assert text == "Hello"
        assert attributes == [
            ':class="{ active: selectedTab === 1 }"',
            ':src="logo.png"',
            'data-icon="star"',
        ]

    def test_dynamic_text_and_attributes(self):
        attributes, text = render_properties(
            {"label": "post.title", "src": "hero", "icon": "a ? b : c"}
        )
        assert text == "{{ post.title }}"
        assert attributes == ['src="hero"', ':data-icon="a ? b : c"']

    def test_component_file(self, feed_document):
        content = _files(feed_document)["src/components/Timeline.vue"]
        assert content.startswith('<template>\n  <div class="timeline">')
        assert '    <header class="header">\n      Latest\n    </header>' in content
        assert '    <div v-if="posts.length === 0">' in content
        assert '      <div class="empty-state">\n        {{ Nothing yet }}' in content
        assert "    <div v-else>" in content
        assert '      <div v-for="post in posts" :key="post.id">' in content
        assert '        <div class="post-card">\n          {{ post.body }}' in content
        assert "// const share = store.share;" in content
        assert content.endswith("<style scoped>\n.timeline {\n}\n</style>")

    def test_component_name_is_pascal_case(self):
        files = _files(parse_apml("interface user_profile:\n  show header:\n"))
        assert "src/components/UserProfile.vue" in files
        assert '<div class="user-profile">' in files["src/components/UserProfile.vue"]
