"""Base logging functionality for step tracing and debugging."""

import html
import logging
from typing import Any

from algostep.logger.html_content import CSS_LOG


class AlgorithmLogger:
    """Base logger class for algorithm tracing.

    Messages go to a standard ``logging`` logger and are mirrored into an
    HTML buffer that can be written out as a standalone trace page.
    """

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._html_content = ['<div class="content">']
        self._css_content: list[str] = [CSS_LOG]
        self._section_open = False

        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist, so loggers
        # sharing a name do not print every message twice.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def section(self, title: str):
        """Create a new section in the log."""
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

        self.logger.info(f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._html_content.append(
            f'<section class="section"><h3>{html.escape(title)}</h3>'
        )
        self._section_open = True

    def info(self, message: str):
        if self.disabled:
            return
        self.logger.info(message)
        self._html_content.append(f'<p class="info">{html.escape(message)}</p>')

    def warning(self, message: str):
        if self.disabled:
            return
        self.logger.warning(message)
        self._html_content.append(f'<p class="warning">{html.escape(message)}</p>')

    def error(self, message: str):
        if self.disabled:
            return
        self.logger.error(message)
        self._html_content.append(f'<p class="error">{html.escape(message)}</p>')

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        if self.disabled:
            return
        self.logger.info(f"{label}: {value}")
        self._html_content.append(
            f'<div class="result"><strong>{html.escape(label)}:</strong> '
            f"{html.escape(str(value))}</div>"
        )

    def raw_html(self, html_content: str):
        """Add raw HTML content to the trace output."""
        if self.disabled:
            return
        self._html_content.append(html_content)

    def end_section(self):
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

    def clear(self):
        """Clear all accumulated content."""
        self._html_content = ['<div class="content">']
        self._css_content = [CSS_LOG]
        self._section_open = False

    def get_html_content(self) -> str:
        """Accumulated HTML body, with any open section closed."""
        parts = list(self._html_content)
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return "\n".join(parts)

    def get_css_content(self) -> str:
        return "\n".join(self._css_content)

    def write_html(self, path: str) -> None:
        """Write the trace as a standalone HTML page."""
        page = (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{html.escape(self.name)}</title>\n"
            f"<style>{self.get_css_content()}</style>\n</head>\n<body>\n"
            f"{self.get_html_content()}\n</body>\n</html>\n"
        )
        with open(path, mode="w", encoding="utf-8") as f:
            f.write(page)
