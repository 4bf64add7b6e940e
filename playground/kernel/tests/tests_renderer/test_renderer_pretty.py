"""
Playground Renderer -- Pretty-printer Tests

One block element per line, inline runs kept together, content untouched.
"""

from playground.kernel.pretty import pretty_html


class TestPrettyHtml:
    def test_nested_blocks_indent(self):
        assert pretty_html("<div><div>a</div></div>") == "<div>\n  <div>a</div>\n</div>"

    def test_custom_indent(self):
        assert pretty_html("<div><p>a</p></div>", indent=4) == "<div>\n    <p>a</p>\n</div>"

    def test_inline_content_stays_on_one_line(self):
        markup = '<button class="ui button"><i class="icon"></i>Save</button>'
        assert pretty_html(markup) == markup

    def test_block_children_break_lines(self):
        markup = "<div><hr/><p>x</p></div>"
        assert pretty_html(markup) == "<div>\n  <hr/>\n  <p>x</p>\n</div>"

    def test_entities_are_kept(self):
        assert pretty_html("<p>&lt;b&gt; &amp;</p>") == "<p>&lt;b&gt; &amp;</p>"

    def test_siblings_at_top_level(self):
        assert pretty_html("<p>a</p><p>b</p>") == "<p>a</p>\n<p>b</p>"
