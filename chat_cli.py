from __future__ import annotations

from typing import Callable, Optional

from core.session import ChatSession
from core.suggestions import SUGGESTIONS

QUIT_COMMANDS = {"/quit", "/exit"}


def print_suggestions(out: Callable[[str], None] = print) -> None:
    out("Suggestions:")
    for i, s in enumerate(SUGGESTIONS, start=1):
        out(f"  /{i}  {s.icon} {s.label}")


def handle_line(session: ChatSession, line: str) -> Optional[str]:
    """
    Run one REPL line. Returns the assistant reply to print, or None when
    nothing was sent. Raises SystemExit on /quit.
    """
    cmd = line.strip()
    if cmd in QUIT_COMMANDS:
        raise SystemExit(0)

    before = len(session.messages)
    if cmd.startswith("/") and cmd[1:].isdigit():
        idx = int(cmd[1:]) - 1
        if not 0 <= idx < len(SUGGESTIONS):
            return f"No suggestion {cmd}. Pick /1 to /{len(SUGGESTIONS)}."
        session.submit_suggestion(SUGGESTIONS[idx])
    else:
        session.submit(line)

    if len(session.messages) == before:
        return None
    return session.messages[-1].content


def main() -> None:
    print("DBT Proposal Research Assistant (type /quit to leave)")
    print_suggestions()
    with ChatSession() as session:
        while True:
            try:
                line = input("\nyou> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            try:
                reply = handle_line(session, line)
            except SystemExit:
                break
            if reply is not None:
                print(f"\n{reply}")


if __name__ == "__main__":
    main()
