"""
Minimal markdown to HTML converter for rendering the project document.
Classifies each source line on its own, then groups adjacent list items into
<ul>/<ol> runs.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Pattern, Sequence, Tuple


class FragmentKind(str, Enum):
    """Which rule family produced a fragment"""

    HEADING = "heading"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    PARAGRAPH = "paragraph"
    CODE_OPEN = "code_open"
    CODE_CLOSE = "code_close"
    BLANK = "blank"


class RunState(str, Enum):
    """List wrapper state"""

    NONE = "none"
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(frozen=True)
class Fragment:
    """HTML produced for one source line, tagged with the rule that made it"""

    html: str
    kind: FragmentKind


# Any character except a line terminator (\r, LINE SEPARATOR, PARAGRAPH SEPARATOR)
_CHAR = "[^\r\u2028\u2029]"

# Characters JavaScript's String.prototype.trim() removes
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class Rule:
    """One pattern-to-fragment mapping, anchored at the start of the line"""

    name: str
    pattern: Pattern[str]
    template: str
    kind: FragmentKind

    def match(self, line: str) -> Tuple[bool, str]:
        """
        Test the rule against a raw source line.

        Args:
            line: Source line, untrimmed

        Returns:
            tuple: (matched, captured text). Captured text is "" for rules
            without a capture group or when the rule does not match.
        """
        m = self.pattern.match(line)
        if m is None:
            return False, ""
        return True, (m.group(1) if self.pattern.groups else "")

    def render(self, captured: str) -> str:
        return self.template.format(captured)


# Order matters: first match wins.
RULES: Tuple[Rule, ...] = (
    Rule("h1", re.compile(f"# ({_CHAR}*)"), "<h1>{}</h1>", FragmentKind.HEADING),
    Rule("h2", re.compile(f"## ({_CHAR}*)"), "<h2>{}</h2>", FragmentKind.HEADING),
    Rule("h3", re.compile(f"### ({_CHAR}*)"), "<h3>{}</h3>", FragmentKind.HEADING),
    Rule(
        "unordered_item",
        re.compile(f"- ({_CHAR}*)"),
        "<li>{}</li>",
        FragmentKind.UNORDERED_ITEM,
    ),
    Rule(
        "ordered_item",
        re.compile(f"[0-9]+\\. ({_CHAR}*)"),
        "<li>{}</li>",
        FragmentKind.ORDERED_ITEM,
    ),
    Rule(
        "bold",
        re.compile(f"\\*\\*({_CHAR}+)\\*\\*"),
        "<p><strong>{}</strong></p>",
        FragmentKind.PARAGRAPH,
    ),
    Rule(
        "italic",
        re.compile(f"\\*({_CHAR}+)\\*"),
        "<p><em>{}</em></p>",
        FragmentKind.PARAGRAPH,
    ),
    Rule("code_open", re.compile("```"), "<pre><code>", FragmentKind.CODE_OPEN),
    # Shadowed by code_open, so a bare closing fence also opens a block.
    Rule("code_close", re.compile("```\\Z"), "</code></pre>", FragmentKind.CODE_CLOSE),
)

_BLANK = Fragment("", FragmentKind.BLANK)

_OPEN_TAGS = {RunState.UNORDERED: "<ul>", RunState.ORDERED: "<ol>"}
_CLOSE_TAGS = {RunState.UNORDERED: "</ul>", RunState.ORDERED: "</ol>"}
_ITEM_RUNS = {
    FragmentKind.UNORDERED_ITEM: RunState.UNORDERED,
    FragmentKind.ORDERED_ITEM: RunState.ORDERED,
}


def classify_line(line: str) -> Fragment:
    """
    Convert one source line to an HTML fragment.

    Rules are tried in priority order (headings, list items, bold, italic,
    code fences). A line that is empty after trimming gives an empty
    fragment; anything else becomes a paragraph of the untrimmed line.
    Content is interpolated as-is, without HTML escaping.

    Args:
        line: Source line

    Returns:
        Fragment: HTML and the kind of rule that produced it
    """
    for rule in RULES:
        matched, captured = rule.match(line)
        if matched:
            return Fragment(rule.render(captured), rule.kind)

    if line.strip(_JS_WHITESPACE) == "":
        return _BLANK

    return Fragment(f"<p>{line}</p>", FragmentKind.PARAGRAPH)


def render_line(line: str) -> str:
    """Convert one source line to its HTML string"""
    return classify_line(line).html


def classify_lines(lines: Iterable[str]) -> List[Fragment]:
    """Classify every line, one fragment per line, order preserved"""
    return [classify_line(line) for line in lines]


def wrap_list_items(fragments: Sequence[Fragment]) -> List[str]:
    """
    Insert <ul>/<ol> tags around contiguous runs of list items.

    The run type comes from each fragment's kind. A change from unordered to
    ordered items (or back) closes the current run and opens a new one, even
    with no blank line between them.

    Args:
        fragments: Classified fragments in source order

    Returns:
        list: HTML strings, the original fragments plus run delimiters
    """
    result: List[str] = []
    state = RunState.NONE

    for fragment in fragments:
        run = _ITEM_RUNS.get(fragment.kind, RunState.NONE)

        if run is not state:
            if state is not RunState.NONE:
                result.append(_CLOSE_TAGS[state])
            if run is not RunState.NONE:
                result.append(_OPEN_TAGS[run])
            state = run

        result.append(fragment.html)

    # Close list if still open
    if state is not RunState.NONE:
        result.append(_CLOSE_TAGS[state])

    return result


def markdown_to_fragments(text: str) -> List[str]:
    """Convert markdown to the list of HTML fragments, before joining"""
    return wrap_list_items(classify_lines(text.split("\n")))


def markdown_to_html(text: str) -> str:
    """
    Convert markdown to HTML.

    Supports:
    - # / ## / ### headings
    - "- item" and "1. item" lists
    - whole-line **bold** and *italic* paragraphs
    - ``` code fences
    - blank lines

    Args:
        text: Markdown text

    Returns:
        HTML text, one fragment per line
    """
    if not text:
        return ""

    return "\n".join(markdown_to_fragments(text))
