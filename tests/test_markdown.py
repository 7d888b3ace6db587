"""Unit tests for rendermark.utils.markdown."""

import pytest

from rendermark.utils.markdown import (
    RULES,
    Fragment,
    FragmentKind,
    classify_line,
    classify_lines,
    markdown_to_fragments,
    markdown_to_html,
    render_line,
    wrap_list_items,
)

DELIMITERS = {"<ul>", "</ul>", "<ol>", "</ol>"}


class TestClassifyLine:
    """Test cases for the per-line rules."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("# Title", "<h1>Title</h1>"),
            ("## Section", "<h2>Section</h2>"),
            ("### Sub", "<h3>Sub</h3>"),
            ("# ", "<h1></h1>"),
            ("- item", "<li>item</li>"),
            ("1. first", "<li>first</li>"),
            ("42. answer", "<li>answer</li>"),
            ("**bold**", "<p><strong>bold</strong></p>"),
            ("*italic*", "<p><em>italic</em></p>"),
            ("```", "<pre><code>"),
            ("```python", "<pre><code>"),
            ("plain text", "<p>plain text</p>"),
        ],
    )
    def test_rule_output(self, line, expected):
        assert render_line(line) == expected

    def test_heading_kind(self):
        assert classify_line("# Title") == Fragment("<h1>Title</h1>", FragmentKind.HEADING)

    def test_list_item_kinds(self):
        assert classify_line("- a").kind is FragmentKind.UNORDERED_ITEM
        assert classify_line("3. a").kind is FragmentKind.ORDERED_ITEM

    @pytest.mark.parametrize("line", ["#### Deep", "#Title", "  # Title", "-a", "1.a", " - a"])
    def test_markers_only_match_at_line_start_with_space(self, line):
        assert render_line(line) == f"<p>{line}</p>"

    def test_bold_is_greedy_to_last_delimiter(self):
        assert render_line("**a** and **b**") == "<p><strong>a** and **b</strong></p>"

    def test_bold_drops_text_after_closing_delimiter(self):
        assert render_line("**bold** tail") == "<p><strong>bold</strong></p>"

    def test_italic_is_greedy_to_last_delimiter(self):
        assert render_line("*a* b *c*") == "<p><em>a* b *c</em></p>"

    def test_bold_takes_precedence_over_italic(self):
        assert classify_line("**x**").html.startswith("<p><strong>")

    def test_bare_delimiters_fall_through_to_paragraph(self):
        assert render_line("**") == "<p>**</p>"

    def test_list_marker_beats_emphasis(self):
        assert render_line("- **x**") == "<li>**x**</li>"

    def test_bare_closing_fence_opens_a_block(self):
        fragment = classify_line("```")

        assert fragment.html == "<pre><code>"
        assert fragment.kind is FragmentKind.CODE_OPEN

    def test_close_fence_rule_is_ordered_after_open_rule(self):
        names = [rule.name for rule in RULES]

        assert names.index("code_open") < names.index("code_close")
        matched, _ = next(r for r in RULES if r.name == "code_close").match("```")
        assert matched

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank_lines_give_empty_fragment(self, line):
        fragment = classify_line(line)

        assert fragment.html == ""
        assert fragment.kind is FragmentKind.BLANK

    def test_default_keeps_untrimmed_line(self):
        assert render_line("  indented ") == "<p>  indented </p>"

    def test_no_html_escaping(self):
        assert render_line("<script>x</script>") == "<p><script>x</script></p>"
        assert render_line("- a & b < c") == "<li>a & b < c</li>"

    def test_generated_html_is_not_reclassified(self):
        assert render_line("<h1>x</h1>") == "<p><h1>x</h1></p>"
        assert render_line("<li>x</li>") == "<p><li>x</li></p>"

    def test_braces_are_copied_verbatim(self):
        assert render_line("# {0} {name}") == "<h1>{0} {name}</h1>"

    def test_capture_stops_at_carriage_return(self):
        assert render_line("# Title\r") == "<h1>Title</h1>"
        assert render_line("- item\r") == "<li>item</li>"

    def test_bold_without_delimiter_before_carriage_return(self):
        assert render_line("**a\r**") == "<p>**a\r**</p>"

    @pytest.mark.parametrize("line", ["\ufeff", "\u00a0", " \u3000 ", "\u2028"])
    def test_javascript_whitespace_lines_are_blank(self, line):
        assert classify_line(line).kind is FragmentKind.BLANK

    @pytest.mark.parametrize("line", ["\x1c", "\x1f", "\x85"])
    def test_python_only_whitespace_is_not_blank(self, line):
        assert render_line(line) == f"<p>{line}</p>"

    def test_ordered_items_need_ascii_digits(self):
        line = "\u0661. arabic-indic one"
        assert render_line(line) == f"<p>{line}</p>"

    def test_rule_match_returns_explicit_capture(self):
        h1 = RULES[0]

        assert h1.match("# Hello") == (True, "Hello")
        assert h1.match("Hello") == (False, "")


class TestWrapListItems:
    """Test cases for list run grouping."""

    def test_groups_unordered_run_before_paragraph(self):
        fragments = classify_lines(["- a", "- b", "text"])

        assert [f.html for f in fragments] == ["<li>a</li>", "<li>b</li>", "<p>text</p>"]
        assert wrap_list_items(fragments) == [
            "<ul>",
            "<li>a</li>",
            "<li>b</li>",
            "</ul>",
            "<p>text</p>",
        ]

    def test_type_change_forces_boundary(self):
        assert wrap_list_items(classify_lines(["- a", "1. b"])) == [
            "<ul>",
            "<li>a</li>",
            "</ul>",
            "<ol>",
            "<li>b</li>",
            "</ol>",
        ]

    def test_ordered_to_unordered_boundary(self):
        assert wrap_list_items(classify_lines(["1. a", "2. b", "- c"])) == [
            "<ol>",
            "<li>a</li>",
            "<li>b</li>",
            "</ol>",
            "<ul>",
            "<li>c</li>",
            "</ul>",
        ]

    def test_blank_line_closes_run(self):
        assert wrap_list_items(classify_lines(["- a", "   ", "- b"])) == [
            "<ul>",
            "<li>a</li>",
            "</ul>",
            "",
            "<ul>",
            "<li>b</li>",
            "</ul>",
        ]

    def test_run_at_end_is_closed(self):
        assert wrap_list_items(classify_lines(["text", "1. a"])) == [
            "<p>text</p>",
            "<ol>",
            "<li>a</li>",
            "</ol>",
        ]

    def test_no_lists_passes_through(self):
        fragments = classify_lines(["# T", "body"])

        assert wrap_list_items(fragments) == ["<h1>T</h1>", "<p>body</p>"]

    def test_empty_sequence(self):
        assert wrap_list_items([]) == []

    def test_run_type_comes_from_kind_not_text(self):
        fragments = [Fragment("<li>x</li>", FragmentKind.ORDERED_ITEM)]

        assert wrap_list_items(fragments) == ["<ol>", "<li>x</li>", "</ol>"]


class TestMarkdownToHtml:
    """Test cases for the full conversion."""

    SAMPLE = "\n".join(
        [
            "# Title",
            "",
            "Intro text",
            "- one",
            "- two",
            "1. first",
            "**Bold**",
            "*Italic*",
            "```",
            "code line",
            "```",
            "## End",
        ]
    )

    def test_fragment_count_matches_line_count(self):
        lines = self.SAMPLE.split("\n")

        assert len(classify_lines(lines)) == len(lines)

    def test_wrapping_only_adds_paired_delimiters(self):
        lines = self.SAMPLE.split("\n")
        original = [f.html for f in classify_lines(lines)]
        wrapped = markdown_to_fragments(self.SAMPLE)

        assert [f for f in wrapped if f not in DELIMITERS] == original
        assert wrapped.count("<ul>") == wrapped.count("</ul>") == 1
        assert wrapped.count("<ol>") == wrapped.count("</ol>") == 1

    def test_sample_document(self):
        assert markdown_to_html(self.SAMPLE) == "\n".join(
            [
                "<h1>Title</h1>",
                "",
                "<p>Intro text</p>",
                "<ul>",
                "<li>one</li>",
                "<li>two</li>",
                "</ul>",
                "<ol>",
                "<li>first</li>",
                "</ol>",
                "<p><strong>Bold</strong></p>",
                "<p><em>Italic</em></p>",
                "<pre><code>",
                "<p>code line</p>",
                "<pre><code>",
                "<h2>End</h2>",
            ]
        )

    def test_unterminated_fence(self):
        assert markdown_to_html("```\ncode") == "<pre><code>\n<p>code</p>"

    def test_empty_input(self):
        assert markdown_to_html("") == ""
        assert markdown_to_fragments("") == [""]

    def test_crlf_document(self):
        assert markdown_to_html("# A\r\n- b\r\n") == "<h1>A</h1>\n<ul>\n<li>b</li>\n</ul>\n"

    def test_trailing_newline_gives_trailing_empty_fragment(self):
        assert markdown_to_fragments("text\n") == ["<p>text</p>", ""]
