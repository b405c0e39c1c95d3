"""Display surfaces that receive rendered markup."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

PAGE_MODE = 0o644

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
{css}
</style>
</head>
<body>
{markup}
</body>
</html>
"""


class Mount(Protocol):
    def load_css(self, *sheets: str) -> None: ...

    def set_inner_html(self, markup: str) -> None: ...


class MemoryMount:
    """Keeps the current markup in memory."""

    def __init__(self) -> None:
        self.css: tuple[str, ...] = ()
        self.markup = ""
        self.updates = 0

    def load_css(self, *sheets: str) -> None:
        self.css = sheets

    def set_inner_html(self, markup: str) -> None:
        self.markup = markup
        self.updates += 1


class FileMount:
    """Writes a standalone HTML page embedding the stylesheets and markup.

    Every update replaces the whole file atomically, so a reader never sees a
    partially written page.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.css: tuple[str, ...] = ()

    def load_css(self, *sheets: str) -> None:
        self.css = sheets

    def set_inner_html(self, markup: str) -> None:
        page = PAGE_TEMPLATE.format(css="\n".join(self.css), markup=markup)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".glassweather-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(page)
            os.chmod(tmp, PAGE_MODE)
            os.replace(tmp, self.path)
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(page), self.path)
