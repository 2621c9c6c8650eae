"""
Terminal session for browsing artworks and building a cross-page selection.

Reads commands from a prompt, drives the page coordinator and prints the
current page with its selection marks.
"""
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from artic_config import ConfigurationError, load_configuration
from artic_core.api_client import ArticAPIClient
from artic_core.data_models import ARTWORK_FIELDS, Artwork
from artic_core.page_coordinator import PageCoordinator

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  n, next            next page
  p, prev            previous page
  g N, goto N        jump to page N
  t ID [ID ...]      toggle rows on this page
  a, all             select / deselect every row on this page
  s N, select N      select the first N rows of this page (clears others)
  l, list            show the current page again
  h, help            show this help
  q, quit            exit"""

_ALIASES = {
    "n": "next", "next": "next",
    "p": "prev", "prev": "prev", "previous": "prev",
    "g": "goto", "goto": "goto",
    "t": "toggle", "toggle": "toggle",
    "a": "all", "all": "all",
    "s": "select", "select": "select",
    "l": "list", "list": "list",
    "h": "help", "help": "help", "?": "help",
    "q": "quit", "quit": "quit", "exit": "quit",
}


@dataclass(frozen=True)
class Command:
    name: str
    args: Tuple[str, ...] = ()


def parse_command(line: str) -> Optional[Command]:
    """Split a prompt line into a known command, or None if unknown/blank."""
    parts = line.strip().split()
    if not parts:
        return None
    name = _ALIASES.get(parts[0].lower())
    if name is None:
        return None
    return Command(name=name, args=tuple(parts[1:]))


def format_value(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, str):
        return value or "N/A"
    return str(value)


def _truncate(text: str, width: int) -> str:
    text = " ".join(text.split())
    return text if len(text) <= width else text[:width - 1] + "…"


class TerminalSession:
    """Executes parsed commands against a PageCoordinator."""

    def __init__(self, coordinator: PageCoordinator,
                 output: Callable[[str], None] = print) -> None:
        self.coordinator = coordinator
        self.output = output

    async def execute(self, command: Command) -> bool:
        """Run one command. Returns False when the session should end."""
        coordinator = self.coordinator
        handler = {
            "next": self._next,
            "prev": self._prev,
            "goto": self._goto,
            "toggle": self._toggle,
            "all": self._all,
            "select": self._select,
        }.get(command.name)

        if command.name == "quit":
            return False
        if command.name == "help":
            self.output(HELP_TEXT)
            return True
        if command.name == "list":
            self.render()
            return True
        if handler is None:
            self.output(f"Unknown command: {command.name}")
            return True

        await handler(command.args)
        if not coordinator.loading:
            self.render()
        return True

    async def _next(self, args: Tuple[str, ...]) -> None:
        if not await self.coordinator.next_page():
            self.output("Already on the last page.")

    async def _prev(self, args: Tuple[str, ...]) -> None:
        if not await self.coordinator.previous_page():
            self.output("Already on the first page.")

    async def _goto(self, args: Tuple[str, ...]) -> None:
        try:
            page_index = int(args[0]) if len(args) == 1 else 0
        except ValueError:
            page_index = 0
        if page_index < 1:
            self.output("Usage: goto N (N >= 1)")
            return
        await self.coordinator.load_page(page_index)

    async def _toggle(self, args: Tuple[str, ...]) -> None:
        ids = []
        for arg in args:
            try:
                ids.append(int(arg))
            except ValueError:
                self.output(f"Not an id: {arg}")
                return
        if not ids:
            self.output("Usage: toggle ID [ID ...]")
            return

        page = self.coordinator.page
        missing = [record_id for record_id in ids if not page.contains(record_id)]
        if missing:
            self.output(f"Not on this page: {', '.join(map(str, missing))}")

        # The table reports the full new selection for the page
        flipped = set(ids)
        selected = {record.id for record in self.coordinator.view}
        new_selection: List[Artwork] = [
            record for record in page.records
            if (record.id in selected) != (record.id in flipped)
        ]
        self.coordinator.toggle_selection(new_selection)

    async def _all(self, args: Tuple[str, ...]) -> None:
        if not self.coordinator.toggle_select_all_on_page():
            self.output("Nothing to select on this page.")

    async def _select(self, args: Tuple[str, ...]) -> None:
        raw = " ".join(args)
        result = self.coordinator.select_first_n(raw)
        if not result:
            self.output(f"Selection declined: {result.reason}")
        elif result.truncated:
            self.output(f"Requested {result.requested} row(s) but this page holds "
                        f"{result.selected}; selected {result.selected}.")

    def render(self) -> None:
        coordinator = self.coordinator
        page = coordinator.page
        summary = coordinator.summary
        selected = {record.id for record in coordinator.view}

        if summary.all_selected_on_page:
            header_box = "[x]"
        elif summary.partial_selected_on_page:
            header_box = "[-]"
        else:
            header_box = "[ ]"

        self.output(f"{header_box} {summary.status_text}")
        self.output(f"Page {page.page_index} of {page.total_pages or 1} "
                    f"({page.total_count} artworks)")
        if page.is_empty:
            self.output("No artworks found")
            return

        for record in page.records:
            mark = "[x]" if record.id in selected else "[ ]"
            columns = " | ".join(
                _truncate(format_value(getattr(record, name)), 28) for name in ARTWORK_FIELDS
            )
            self.output(f"{mark} {record.id:>8}  {columns}")


async def run_session(coordinator: PageCoordinator,
                      read_line: Callable[[str], str] = input) -> None:
    session = TerminalSession(coordinator)
    await coordinator.start()
    session.render()
    session.output("Type 'help' for commands.")

    while True:
        try:
            line = await asyncio.to_thread(read_line, "> ")
        except EOFError:
            break
        command = parse_command(line)
        if command is None:
            if line.strip():
                session.output("Unknown command. Type 'help' for commands.")
            continue
        if not await session.execute(command):
            break


def main() -> int:
    try:
        config = load_configuration()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=config.log_level.upper(),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    coordinator = PageCoordinator(ArticAPIClient(config), page_size=config.page_size)
    try:
        asyncio.run(run_session(coordinator))
    except KeyboardInterrupt:
        print()
    finally:
        coordinator.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
