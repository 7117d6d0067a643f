from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from core.models import ChatRequest, Message
from core.templates import DEFAULT_TEMPLATE, SYSTEM_PROMPT, get_template


class RequestMalformed(ValueError):
    """Conversation missing, empty, or not shaped like a list of messages."""


# ---------------------------
# Keyword routes
# ---------------------------

# Evaluated top to bottom; the first route with any matching keyword wins.
KEYWORD_ROUTES: List[Tuple[str, Tuple[str, ...]]] = [
    ("overview", ("project overview", "introduction")),
    ("objectives", ("objective", "outcome", "goal")),
    ("methodology", ("methodology", "approach", "implementation")),
    ("budget", ("budget", "funding", "cost")),
    ("impact", ("impact", "significance", "societal")),
    ("collaboration", ("collaboration", "partner", "hub", "spoke")),
]


def select_route(text: str) -> str:
    """Return the template name for a single prompt."""
    t = (text or "").lower()
    for name, keywords in KEYWORD_ROUTES:
        for kw in keywords:
            if kw in t:
                return name
    return DEFAULT_TEMPLATE


# ---------------------------
# Validation
# ---------------------------

def validate_messages(raw: Any) -> List[Message]:
    """
    Coerce a raw conversation (dicts or Message objects) into Messages.
    Raises RequestMalformed for anything that isn't a non-empty list of
    {role, content} entries.
    """
    if not isinstance(raw, (list, tuple)):
        raise RequestMalformed("messages must be a list")
    try:
        req = ChatRequest.model_validate({"messages": list(raw)})
    except ValidationError as e:
        raise RequestMalformed(str(e)) from e
    return req.messages


def _last_content(conversation: List[Dict[str, Any]]) -> str:
    return conversation[-1].get("content", "") or ""


# ---------------------------
# Public entrypoints
# ---------------------------

def select_response(messages: Any) -> str:
    """Pick the markdown reply for a conversation. Pure and deterministic."""
    msgs = validate_messages(messages)
    return get_template(select_route(msgs[-1].content))


def generate_response(messages: Any) -> Tuple[str, str]:
    """
    Server-side reply generation. Mirrors an LLM call: the persona prompt is
    prepended as a system entry, but the reply is always a canned template.
    Returns (template_name, markdown).
    """
    msgs = validate_messages(messages)
    conversation: List[Dict[str, Any]] = [{"role": "system", "content": SYSTEM_PROMPT}]
    conversation.extend(m.model_dump() for m in msgs)

    name = select_route(_last_content(conversation))
    return name, get_template(name)
