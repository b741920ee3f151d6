import argparse
import asyncio
import logging

import uvicorn

from planchat.api.gateway import CommandGateway
from planchat.events.console_observers import ConsoleRenderer
from planchat.logic.conversation.session import (
    ChatSession, ClearConversation, InputChanged, LoadSchedule, RefreshPlan, SelectSuggestion,
    ShowSavedSchedules, ShowSchedule, SubmitCommand, ToggleTheme
)
from planchat.logic.summary.plan_summary import summarize_plan
from planchat.utilities.config import API_BASE, LOG_LEVEL, STUB_HOST, STUB_PORT

HELP_TEXT = """Type a command and press ENTER, e.g.: add subject "Math" hours 10 priority HIGH
Client actions:
  :suggest <text>  show matching commands      :pick <n>      take suggestion n
  :schedule        show the current schedule   :saved         list saved schedules
  :load <path>     load a saved schedule       :plan          show the plan sidebar
  :theme           toggle light/dark theme     :clear         clear the chat
  :help            this text                   :quit          exit"""


async def _ask(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def _handle_client_action(session: ChatSession, line: str) -> bool:
    """Map a ':' line to a session action. Returns False to quit."""
    name, _, arg = line[1:].partition(" ")
    name = name.lower()
    if name in ("quit", "q", "exit"):
        return False
    if name == "help":
        print(HELP_TEXT)
    elif name == "suggest":
        await session.dispatch(InputChanged(arg))
    elif name == "pick":
        try:
            chosen = session.suggestions[int(arg) - 1]
        except (ValueError, IndexError):
            print("No such suggestion.")
            return True
        await session.dispatch(SelectSuggestion(chosen))
        if (await _ask("send it? [Y/n] ")).strip().lower() in ("", "y", "yes"):
            await session.dispatch(SubmitCommand(session.input_text))
    elif name == "schedule":
        await session.dispatch(ShowSchedule())
    elif name == "saved":
        await session.dispatch(ShowSavedSchedules())
    elif name == "load":
        await session.dispatch(LoadSchedule(arg))
    elif name == "plan":
        await session.dispatch(RefreshPlan())
        print("\n".join(summarize_plan(session.plan_store.get())))
    elif name == "theme":
        await session.dispatch(ToggleTheme())
    elif name == "clear":
        if (await _ask("Clear all messages? [y/N] ")).strip().lower() in ("y", "yes"):
            await session.dispatch(ClearConversation())
    else:
        print(f"Unknown action :{name} (try :help)")
    return True


async def run_chat(api_base: str, color: bool = True) -> None:
    async with CommandGateway(base_url=api_base) as gateway:
        session = ChatSession(gateway)
        ConsoleRenderer(color=color).attach(session.event_bus)
        for turn in session.log.all():
            print(turn.content)
        await session.start()
        print(HELP_TEXT)
        while True:
            try:
                line = (await _ask("> ")).strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not line:
                continue
            if line.startswith(":"):
                if not await _handle_client_action(session, line):
                    break
                continue
            await session.dispatch(SubmitCommand(line))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Chat client for the study scheduling service.")
    parser.add_argument("--api-base", default=API_BASE, help="Base URL of the command service.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument("--stub", action="store_true", help="Run the local stub service instead of the chat.")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.stub:
        print(f"Stub service running on http://{STUB_HOST}:{STUB_PORT}/api/chatbot (Press CTRL+C to quit)")
        uvicorn.run("planchat.api.stub_server:app", host=STUB_HOST, port=STUB_PORT)
        return

    asyncio.run(run_chat(args.api_base, color=not args.no_color))


if __name__ == "__main__":
    main()
