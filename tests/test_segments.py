"""Tests for segment extraction and merging."""

from vue_audit.core.segments import (
    extract_script,
    extract_segments,
    extract_styles,
    extract_template,
    is_valid_component,
    merge_component,
    merge_segments,
)
from vue_audit.model.component import Style


FULL_COMPONENT = """<template>
  <div class="box">
    <template v-if="ready">
      <span>{{ label }}</span>
    </template>
  </div>
</template>

<script>
export default {
  name: 'Box',
  data() {
    return { ready: true, label: 'ok' }
  }
}
</script>

<style scoped lang="scss">
.box { padding: 4px; }
</style>

<style>
body { margin: 0; }
</style>
"""


class TestIsValidComponent:
    """Tests for is_valid_component."""

    def test_requires_template_and_script(self):
        assert is_valid_component(FULL_COMPONENT) is True

    def test_missing_script_is_invalid(self):
        assert is_valid_component("<template><div /></template>") is False

    def test_missing_template_is_invalid(self):
        assert is_valid_component("<script>export default {}</script>") is False

    def test_plain_markup_is_invalid(self):
        assert is_valid_component("<div>no tags</div>") is False


class TestExtraction:
    """Tests for the extract_* helpers."""

    def test_template_keeps_nested_template_elements(self):
        """The template capture runs to the last closing tag."""
        template = extract_template(FULL_COMPONENT)
        assert template.startswith('<div class="box">')
        assert '<template v-if="ready">' in template
        assert template.endswith("</div>")

    def test_script_is_trimmed(self):
        script = extract_script(FULL_COMPONENT)
        assert script.startswith("export default {")
        assert script.endswith("}")

    def test_styles_in_document_order(self):
        styles = extract_styles(FULL_COMPONENT)
        assert styles == [
            Style(content=".box { padding: 4px; }", scoped=True),
            Style(content="body { margin: 0; }", scoped=False),
        ]

    def test_absent_blocks_yield_empty_values(self):
        assert extract_template("<div />") == ""
        assert extract_script("<div />") == ""
        assert extract_styles("<div />") == []


class TestMerge:
    """Tests for merge_component / merge_segments."""

    def test_empty_segments_are_dropped(self):
        merged = merge_component("", "export default {}", [])
        assert merged == "<script>\nexport default {}\n</script>"

    def test_scoped_flag_is_restored(self):
        merged = merge_component("<div />", "export default {}", [Style("a {}", scoped=True)])
        assert "<style scoped>\na {}\n</style>" in merged

    def test_blocks_separated_by_blank_lines(self):
        merged = merge_component("<div />", "x", [Style("a {}")])
        assert merged == (
            "<template>\n<div />\n</template>\n\n"
            "<script>\nx\n</script>\n\n"
            "<style>\na {}\n</style>"
        )

    def test_round_trip_reproduces_segments(self):
        """Re-extracting a merged component gives back the same segments."""
        segments = extract_segments(FULL_COMPONENT)
        merged = merge_segments(segments)
        assert extract_segments(merged) == segments
