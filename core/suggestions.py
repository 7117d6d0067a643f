from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Suggestion:
    icon: str
    label: str
    prompt_text: str


SUGGESTIONS: List[Suggestion] = [
    Suggestion(
        "📋",
        "Project Overview",
        "Help me draft a comprehensive project overview for the AI-Enabled Imaging Biobank proposal",
    ),
    Suggestion(
        "🎯",
        "Objectives & Outcomes",
        "Guide me in formulating clear objectives and expected outcomes for the hub-and-spoke model",
    ),
    Suggestion(
        "🔬",
        "Methodology",
        "Assist me in developing a detailed methodology section for establishing the biobank network",
    ),
    Suggestion(
        "💰",
        "Budget Planning",
        "Help me create a realistic budget breakdown for the national imaging biobank project",
    ),
    Suggestion(
        "📊",
        "Impact Assessment",
        "Guide me in articulating the societal and scientific impact of this project for India",
    ),
    Suggestion(
        "🤝",
        "Collaboration Plan",
        "Help me design a strategic collaboration framework for hub-and-spoke network partners",
    ),
]


def suggestions_payload() -> List[Dict[str, Any]]:
    return [asdict(s) for s in SUGGESTIONS]
