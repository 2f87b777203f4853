# src/taskbell/cli/commands.py

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

from ..core.state import AppState
from ..tasks.labels import (
    available_locales,
    category_label,
    parse_category,
    parse_priority,
    priority_label,
)
from ..tasks.task_models import Category, Priority, Task
from .timeparse import parse_when

CommandHandler = Callable[[AppState, list[str]], str]

DEFAULT_DURATION = timedelta(hours=1)
ADD_FIELDS = ("title", "details", "start", "end", "priority", "category")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task, index: int, locale: str | None = None) -> str:
    done = "x" if task.is_completed else " "
    star = "*" if task.is_favorite else " "
    when = task.start_date.strftime("%Y-%m-%d %H:%M")
    line = (
        f"{index:>2}. [{done}]{star} {task.title} "
        f"({when}, {priority_label(task.priority, locale)}, {category_label(task.category, locale)})"
    )
    if task.details:
        line += f"\n      {task.details}"
    return line


def resolve_task(state: AppState, ref: str) -> Task | None:
    """
    Find a task by 1-based list position or by (unique) id prefix.

    A number outside the list range is tried as an id prefix, since
    UUID prefixes can be all digits.
    """
    tasks = state.store.tasks()
    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1]

    matches = [t for t in tasks if t.id.startswith(ref.lower())]
    if len(matches) == 1:
        return matches[0]
    return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list       -> all tasks
    /list open  -> not completed
    /list done  -> completed
    /list fav   -> favorites
    """
    tasks = state.store.tasks()
    flt = args[0].lower() if args else "all"

    if flt == "open":
        shown = [(i, t) for i, t in enumerate(tasks, start=1) if not t.is_completed]
    elif flt == "done":
        shown = [(i, t) for i, t in enumerate(tasks, start=1) if t.is_completed]
    elif flt in ("fav", "favorites"):
        shown = [(i, t) for i, t in enumerate(tasks, start=1) if t.is_favorite]
    elif flt == "all":
        shown = list(enumerate(tasks, start=1))
    else:
        return "Usage: /list [open|done|fav]"

    if not shown:
        return "No tasks."
    return "\n".join(format_task(t, i, state.label_locale) for i, t in shown)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add title | details | start | end | priority | category

    Only the title is required. Defaults: start=now, end=start+1h,
    priority=Medium, category=Work.
    """
    fields = [p.strip() for p in " ".join(args).split("|")]
    if not fields[0] or len(fields) > len(ADD_FIELDS):
        return "Usage: /add title | details | start | end | priority | category"

    fields += [""] * (len(ADD_FIELDS) - len(fields))
    title, details, start_s, end_s, prio_s, cat_s = fields

    try:
        start = parse_when(start_s) if start_s else parse_when("now")
        end = parse_when(end_s) if end_s else start + DEFAULT_DURATION
    except ValueError as e:
        return str(e)

    priority = parse_priority(prio_s, state.label_locale) if prio_s else Priority.MEDIUM
    if priority is None:
        return f"Unknown priority: {prio_s!r}"
    category = parse_category(cat_s, state.label_locale) if cat_s else Category.WORK
    if category is None:
        return f"Unknown category: {cat_s!r}"

    task = state.store.create(title, details, start, end, priority, category)
    return f"Added {task.title!r} at {task.start_date:%Y-%m-%d %H:%M} (id {task.id[:8]})."


def _toggle_command(state: AppState, args: list[str], *, favorite: bool) -> str:
    name = "fav" if favorite else "done"
    if not args:
        return f"Usage: /{name} <number|id>"

    task = resolve_task(state, args[0])
    if task is None:
        return f"No such task: {args[0]}"

    if favorite:
        updated = state.store.toggle_favorite(task.id)
    else:
        updated = state.store.toggle_completion(task.id)
    if updated is None:
        return f"No such task: {args[0]}"

    if favorite:
        return f"{updated.title!r} is {'now' if updated.is_favorite else 'no longer'} a favorite."
    return f"{updated.title!r} marked {'done' if updated.is_completed else 'not done'}."


def cmd_done(state: AppState, args: list[str]) -> str:
    return _toggle_command(state, args, favorite=False)


def cmd_fav(state: AppState, args: list[str]) -> str:
    return _toggle_command(state, args, favorite=True)


def cmd_reminders(state: AppState, args: list[str]) -> str:
    pending = state.scheduler.pending()
    if not pending:
        return "No pending reminders."
    lines = ["Pending reminders:"]
    for r in pending:
        lines.append(f"  {r.fire_at:%Y-%m-%d %H:%M}  {r.title}")
    return "\n".join(lines)


def cmd_lang(state: AppState, args: list[str]) -> str:
    locales = available_locales()
    if not args:
        return f"Labels: {state.label_locale}. Available: {', '.join(locales)}."
    loc = args[0].lower()
    if loc not in locales:
        return f"Unknown locale {loc!r}. Available: {', '.join(locales)}."
    state.label_locale = loc
    return f"Labels switched to {loc}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks: /list [open|done|fav].", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add title | details | start | end | priority | category.",
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <number|id>.")
registry.register("fav", cmd_fav, help_text="Toggle favorite: /fav <number|id>.")
registry.register("reminders", cmd_reminders, help_text="Show pending reminders.")
registry.register("lang", cmd_lang, help_text="Label language: /lang en | /lang tr.")
