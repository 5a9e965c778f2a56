"""Page templating helpers."""
from __future__ import annotations
from pathlib import Path

PAGE_TEMPLATE = Path(__file__).resolve().parent.parent / "web" / "templates" / "index.html"

def load_template(path: str | Path = PAGE_TEMPLATE) -> str:
    """
    Load a page template file.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8")

def render_template(template: str, **values: object) -> str:
    """
    Substitute {{name}} placeholders in the template.

    Args:
        template: Template content.
        values: Placeholder values; unknown placeholders are left as-is.

    Returns:
        Rendered page.
    """
    for name, value in values.items():
        template = template.replace("{{" + name + "}}", str(value))
    return template
