# ABOUTME: Tests for the comment-preserving JSONC reader and editor
# ABOUTME: Covers parsing, set_value and remove_value
import pytest

from nia_wizard.errors import ConfigParseError
from nia_wizard.utils import jsonc

COMMENTED = """{
  // Servers used by the editor
  "mcpServers": {
    /* keep this one */
    "other": {
      "command": "node",
      "args": ["server.js"]
    }
  },
  "theme": "dark"
}
"""


class TestParse:
    """Tests for jsonc.parse."""

    def test_plain_json(self):
        assert jsonc.parse('{"a": 1, "b": [true, null]}') == {"a": 1, "b": [True, None]}

    def test_comments_ignored(self):
        data = jsonc.parse(COMMENTED)
        assert data["mcpServers"]["other"]["command"] == "node"
        assert data["theme"] == "dark"

    def test_url_in_string_is_not_a_comment(self):
        data = jsonc.parse('{"url": "https://example.com/mcp"} // trailing')
        assert data == {"url": "https://example.com/mcp"}

    def test_trailing_commas_allowed(self):
        assert jsonc.parse('{"a": [1, 2,], "b": 2,}') == {"a": [1, 2], "b": 2}

    def test_empty_and_comment_only_text_is_empty_object(self):
        assert jsonc.parse("") == {}
        assert jsonc.parse("  // nothing yet\n") == {}

    def test_escaped_quotes(self):
        assert jsonc.parse(r'{"a": "say \"hi\""}') == {"a": 'say "hi"'}

    def test_duplicate_key_last_wins(self):
        assert jsonc.parse('{"a": 1, "a": 2}') == {"a": 2}

    @pytest.mark.parametrize("text", [
        '{"a": }',
        '{"a": 1',
        '{"a" 1}',
        '{"a": 1 "b": 2}',
        '{"a": 1} extra',
        '{"a": "unterminated}',
        '/* never closed',
    ])
    def test_malformed_raises(self, text):
        with pytest.raises(ConfigParseError):
            jsonc.parse(text)

    def test_error_reports_line(self):
        with pytest.raises(ConfigParseError, match="line 3"):
            jsonc.parse('{\n  "a": 1,\n  "b": ?\n}')


class TestSetValue:
    """Tests for jsonc.set_value."""

    def test_empty_text_creates_document(self):
        result = jsonc.set_value("", ["mcpServers", "nia"], {"command": "pipx"})
        assert jsonc.parse(result) == {"mcpServers": {"nia": {"command": "pipx"}}}
        assert result.endswith("\n")

    def test_insert_into_existing_object_keeps_comments(self):
        result = jsonc.set_value(COMMENTED, ["mcpServers", "nia"], {"url": "https://x/mcp"})

        assert "// Servers used by the editor" in result
        assert "/* keep this one */" in result
        data = jsonc.parse(result)
        assert data["mcpServers"]["nia"] == {"url": "https://x/mcp"}
        assert data["mcpServers"]["other"]["args"] == ["server.js"]
        assert data["theme"] == "dark"

    def test_new_property_uses_sibling_indent(self):
        result = jsonc.set_value(COMMENTED, ["mcpServers", "nia"], {"url": "u"})
        assert '\n    "nia": {\n      "url": "u"\n    }' in result

    def test_creates_missing_intermediate_object(self):
        result = jsonc.set_value('{"theme": "dark"}', ["mcpServers", "nia"], {"url": "u"})
        assert jsonc.parse(result) == {"theme": "dark", "mcpServers": {"nia": {"url": "u"}}}

    def test_replaces_existing_value(self):
        text = '{"mcpServers": {"nia": {"url": "old"}, "other": {}}}'
        result = jsonc.set_value(text, ["mcpServers", "nia"], {"url": "new"})
        data = jsonc.parse(result)
        assert data["mcpServers"]["nia"] == {"url": "new"}
        assert data["mcpServers"]["other"] == {}

    def test_replaces_non_object_intermediate(self):
        result = jsonc.set_value('{"mcpServers": []}', ["mcpServers", "nia"], {"url": "u"})
        assert jsonc.parse(result) == {"mcpServers": {"nia": {"url": "u"}}}

    def test_insert_into_empty_object(self):
        result = jsonc.set_value("{}", ["nia"], 1)
        assert result == '{\n  "nia": 1\n}'

    def test_after_trailing_comma(self):
        result = jsonc.set_value('{\n  "a": 1,\n}', ["b"], 2)
        assert jsonc.parse(result) == {"a": 1, "b": 2}

    def test_comment_only_document(self):
        result = jsonc.set_value("// my settings\n", ["nia"], True)
        assert result.startswith("// my settings\n")
        assert jsonc.parse(result) == {"nia": True}

    def test_crlf_line_endings_preserved(self):
        text = '{\r\n  "a": 1\r\n}\r\n'
        result = jsonc.set_value(text, ["b"], 2)
        assert '\r\n  "b": 2' in result
        assert jsonc.parse(result) == {"a": 1, "b": 2}

    def test_setting_same_value_twice_is_stable(self):
        once = jsonc.set_value(COMMENTED, ["mcpServers", "nia"], {"url": "u"})
        twice = jsonc.set_value(once, ["mcpServers", "nia"], {"url": "u"})
        assert once == twice

    def test_root_must_be_object(self):
        with pytest.raises(ConfigParseError):
            jsonc.set_value("[1, 2]", ["nia"], 1)

    def test_sibling_line_comment_stays_with_sibling(self):
        text = '{\n  "mcpServers": {\n    "github": {"command": "gh"} // my github server\n  }\n}\n'
        result = jsonc.set_value(text, ["mcpServers", "nia"], {"url": "u"})
        assert result == (
            '{\n  "mcpServers": {\n'
            '    "github": {"command": "gh"}, // my github server\n'
            '    "nia": {\n      "url": "u"\n    }\n'
            '  }\n}\n'
        )

    def test_sibling_comment_after_comma_stays_with_sibling(self):
        text = '{\n  "a": 1, // first\n}'
        result = jsonc.set_value(text, ["b"], 2)
        assert result == '{\n  "a": 1, // first\n  "b": 2\n}'

    def test_empty_key_path(self):
        with pytest.raises(ValueError):
            jsonc.set_value("{}", [], 1)


class TestRemoveValue:
    """Tests for jsonc.remove_value."""

    def test_remove_keeps_siblings_and_comments(self):
        added = jsonc.set_value(COMMENTED, ["mcpServers", "nia"], {"url": "u"})
        result = jsonc.remove_value(added, ["mcpServers", "nia"])

        assert "/* keep this one */" in result
        assert jsonc.parse(result) == jsonc.parse(COMMENTED)

    def test_remove_only_property_collapses_object(self):
        text = '{\n  "mcpServers": {\n    "nia": {"command": "x"}\n  }\n}\n'
        result = jsonc.remove_value(text, ["mcpServers", "nia"])
        assert result == '{\n  "mcpServers": {}\n}\n'

    def test_remove_first_of_several(self):
        text = '{"nia": 1, "b": 2, "c": 3}'
        assert jsonc.parse(jsonc.remove_value(text, ["nia"])) == {"b": 2, "c": 3}

    def test_remove_middle(self):
        text = '{"a": 1, "nia": 2, "c": 3}'
        assert jsonc.parse(jsonc.remove_value(text, ["nia"])) == {"a": 1, "c": 3}

    def test_remove_last(self):
        text = '{\n  "a": 1,\n  "nia": 2\n}'
        result = jsonc.remove_value(text, ["nia"])
        assert result == '{\n  "a": 1\n}'

    def test_missing_path_returns_text_unchanged(self):
        assert jsonc.remove_value(COMMENTED, ["mcpServers", "nia"]) == COMMENTED
        assert jsonc.remove_value(COMMENTED, ["nothing", "nia"]) == COMMENTED
        assert jsonc.remove_value("", ["nia"]) == ""

    def test_malformed_raises(self):
        with pytest.raises(ConfigParseError):
            jsonc.remove_value('{"a": ', ["a"])

    def test_remove_middle_keeps_comment_above_next_entry(self):
        text = (
            '{\n  "mcpServers": {\n'
            '    "nia": {"url": "u"},\n'
            '    // my github server\n'
            '    "github": {"command": "gh"}\n'
            '  }\n}\n'
        )
        result = jsonc.remove_value(text, ["mcpServers", "nia"])
        assert result == (
            '{\n  "mcpServers": {\n'
            '    // my github server\n'
            '    "github": {"command": "gh"}\n'
            '  }\n}\n'
        )

    def test_remove_last_keeps_previous_trailing_comment(self):
        text = (
            '{\n  "mcpServers": {\n'
            '    "github": {"command": "gh"}, // my github server\n'
            '    "nia": {"url": "u"}\n'
            '  }\n}\n'
        )
        result = jsonc.remove_value(text, ["mcpServers", "nia"])
        assert result == (
            '{\n  "mcpServers": {\n'
            '    "github": {"command": "gh"} // my github server\n'
            '  }\n}\n'
        )

    def test_remove_takes_own_trailing_comment(self):
        text = '{\n  "nia": 1, // added by nia\n  "b": 2\n}'
        assert jsonc.remove_value(text, ["nia"]) == '{\n  "b": 2\n}'

    def test_add_then_remove_restores_commented_file(self):
        text = '{\n  "a": 1 // first\n}\n'
        added = jsonc.set_value(text, ["nia"], {"url": "u"})
        assert jsonc.remove_value(added, ["nia"]) == text
