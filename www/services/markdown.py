from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin


_markdown = MarkdownIt("commonmark", {"html": True}).enable("table").enable("strikethrough")
_markdown.use(tasklists_plugin)
_markdown.use(footnote_plugin)


def markdown_to_html(text: str) -> str:
    return _markdown.render(text)
