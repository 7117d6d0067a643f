from __future__ import annotations

from pathlib import Path
from typing import Dict

TEMPLATE_DIR = Path(__file__).parent / "templates"
SYSTEM_PROMPT_PATH = Path(__file__).parent / "system_prompt.md"

# Names double as file stems under core/templates/
TEMPLATE_NAMES = (
    "overview",
    "objectives",
    "methodology",
    "budget",
    "impact",
    "collaboration",
    "welcome",
)
DEFAULT_TEMPLATE = "welcome"


def _read(path: Path) -> str:
    # Files end with a single newline; the replies themselves do not.
    return path.read_text(encoding="utf-8").rstrip("\n")


def load_templates(directory: Path = TEMPLATE_DIR) -> Dict[str, str]:
    """Read every named markdown template from disk."""
    return {name: _read(directory / f"{name}.md") for name in TEMPLATE_NAMES}


TEMPLATES: Dict[str, str] = load_templates()
SYSTEM_PROMPT: str = _read(SYSTEM_PROMPT_PATH)


def get_template(name: str) -> str:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise KeyError(f"Unknown template: {name}") from None
