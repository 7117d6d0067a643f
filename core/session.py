from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.config import get_settings
from core.models import Message
from core.store import (
    CONNECTION_FALLBACK,
    ERROR_FALLBACK,
    ConversationState,
    begin_submit,
    complete_submit,
    fail_submit,
    set_input,
)
from core.suggestions import Suggestion

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"


class ChatSession:
    """
    One client session: owns the conversation state and an HTTP client.

    Any httpx.Client works, including FastAPI's TestClient.
    """

    def __init__(self, client: Optional[httpx.Client] = None, base_url: Optional[str] = None) -> None:
        if client is None:
            settings = get_settings()
            client = httpx.Client(base_url=base_url or settings.base_url, timeout=settings.timeout_s)
        self.client = client
        self.state = ConversationState()

    @property
    def messages(self) -> List[Message]:
        return list(self.state.messages)

    @property
    def pending(self) -> bool:
        return self.state.pending

    def set_input(self, text: str) -> None:
        self.state = set_input(self.state, text)

    def submit(self, prompt: Optional[str] = None) -> ConversationState:
        """Send a prompt (or the input buffer) and record the reply."""
        state, outgoing = begin_submit(self.state, prompt)
        if outgoing is None:
            return self.state
        self.state = state

        payload = {"messages": [m.model_dump() for m in outgoing]}
        try:
            r = self.client.post(CHAT_PATH, json=payload)
            data: Dict[str, Any] = r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Chat request failed: %s", e)
            self.state = fail_submit(self.state, CONNECTION_FALLBACK)
            return self.state

        if isinstance(data, dict) and data.get("error"):
            logger.warning("Server reported error: %s", data["error"])
            self.state = fail_submit(self.state, ERROR_FALLBACK)
        elif r.is_success and isinstance(data, dict) and isinstance(data.get("response"), str):
            self.state = complete_submit(self.state, data["response"])
        else:
            logger.warning("Unexpected chat response: status=%s", r.status_code)
            self.state = fail_submit(self.state, CONNECTION_FALLBACK)
        return self.state

    def submit_suggestion(self, suggestion: Suggestion) -> ConversationState:
        return self.submit(suggestion.prompt_text)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "ChatSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
