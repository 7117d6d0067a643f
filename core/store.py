from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from core.models import Message

ERROR_FALLBACK = "I apologize, but I encountered an error. Please try again."
CONNECTION_FALLBACK = "I apologize, but I encountered a connection error. Please try again."


@dataclass(frozen=True)
class ConversationState:
    """
    Client-held conversation for one session.
    Every update returns a new state; nothing here is mutated in place.
    """
    messages: Tuple[Message, ...] = ()
    pending: bool = False
    input_buffer: str = ""


def append(state: ConversationState, message: Message) -> ConversationState:
    return replace(state, messages=state.messages + (message,))


def set_input(state: ConversationState, text: str) -> ConversationState:
    return replace(state, input_buffer=text)


def begin_submit(
    state: ConversationState,
    prompt: Optional[str] = None,
) -> Tuple[ConversationState, Optional[List[Message]]]:
    """
    Start an exchange. `prompt` defaults to the input buffer.
    Returns (new_state, outgoing_messages), or (state, None) when the
    prompt is blank and nothing should be sent.
    """
    text = prompt if prompt else state.input_buffer
    if not (text or "").strip():
        return state, None

    nxt = append(state, Message(role="user", content=text))
    nxt = replace(nxt, input_buffer="", pending=True)
    return nxt, list(nxt.messages)


def complete_submit(state: ConversationState, content: str) -> ConversationState:
    nxt = append(state, Message(role="assistant", content=content))
    return replace(nxt, pending=False)


def fail_submit(state: ConversationState, fallback: str = CONNECTION_FALLBACK) -> ConversationState:
    return complete_submit(state, fallback)
