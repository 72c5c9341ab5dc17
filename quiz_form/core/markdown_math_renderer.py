"""Markdown rendering helpers shared by the Qt form and the scoring API.

Qt rich-text labels understand a small HTML subset, so question text,
answers and explanations are converted with markdown-it before display.
Math delimiters (``$...$``) are passed through untouched; the API exposes
the same fragments so a browser client can typeset them with MathJax.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into a block-level HTML fragment."""

        sanitized = markdown_text.strip() or ""
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without the surrounding paragraph, for labels."""

        return self._markdown.renderInline(markdown_text.strip())


renderer = MarkdownMathRenderer()
# Shared instance; MarkdownIt is safe for concurrent read-only renders, so the
# Qt thread and the API thread can both use it.
