"""habitpulse — console shell entry point.

Starts:
1. Habit store (demo habits unless SEED_DEMO_HABITS=false)
2. Notification slot on the running event loop
3. Command loop reading stdin

Commands:
  dashboard | habits | stats    switch view
  show                          redraw the current view
  add <name>                    add a habit
  set <id> <value>              record today's progress
  del <id>                      delete a habit
  theme                         toggle dark mode
  quit
"""

import asyncio
import logging

from habitpulse.notifications import NotificationScheduler
from habitpulse.overview import (
    build_overview,
    completion_slices,
    progress_bars,
    weekly_series,
)
from habitpulse.runtime_state import (
    get_custom,
    get_dark_mode,
    set_custom,
    toggle_dark_mode,
)
from habitpulse.store import HabitStore, build_default_store, format_number

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)-5s %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("habitpulse")

QUIT = object()


def render_dashboard(store: HabitStore) -> str:
    habits = store.list_habits()
    overview = build_overview(habits)
    if not overview:
        return "No habits yet. Try: add <name>"
    lines = [overview["summary"]]
    for bar in progress_bars(habits):
        filled = int(bar["percent"] // 10)
        lines.append(
            f"  {bar['icon']} {bar['name']:<14} [{'#' * filled:<10}] "
            f"{format_number(bar['progress'])}/{format_number(bar['goal'])} {bar['unit']}"
        )
    for s in overview.get("streaks", []):
        lines.append(f"  🔥 {s['name']}: {s['streak_days']} days")
    return "\n".join(lines)


def render_habits(store: HabitStore) -> str:
    lines = []
    for series in weekly_series(store.list_habits()):
        values = " ".join(
            f"{p['date']}={format_number(p['value'])}" for p in series["data"]
        )
        lines.append(
            f"[{series['id']}] {series['name']} (goal {format_number(series['goal'])}, "
            f"met {series['days_goal_met']}/{len(series['data'])} days)\n    {values}"
        )
    return "\n".join(lines) or "No habits yet."


def render_stats(store: HabitStore) -> str:
    slices = completion_slices(store.list_habits())
    return "\n".join(f"  {s['name']}: {s['value']:.1f}%" for s in slices) or "No habits yet."


VIEWS = {
    "dashboard": render_dashboard,
    "habits": render_habits,
    "stats": render_stats,
}


def render_active_view(store: HabitStore) -> str:
    """Render whichever view was last selected (dashboard by default)."""
    return VIEWS.get(get_custom("view"), render_dashboard)(store)


def handle_command(store: HabitStore, line: str):
    """Run one command line. Returns text to print, None, or QUIT."""
    cmd, _, rest = line.strip().partition(" ")
    cmd = cmd.lower()
    rest = rest.strip()

    if not cmd:
        return None
    if cmd in ("quit", "exit", "q"):
        return QUIT
    if cmd == "list":
        cmd = "dashboard"
    if cmd in VIEWS:
        set_custom("view", cmd)
        return VIEWS[cmd](store)
    if cmd == "show":
        return render_active_view(store)
    if cmd == "add":
        store.add_habit(rest)
        return None
    if cmd == "set":
        habit_id, _, value = rest.partition(" ")
        if store.get_habit(habit_id) is None:
            return f"No habit with id {habit_id!r}"
        store.update_progress(habit_id, value.strip())
        return None
    if cmd in ("del", "delete"):
        if store.get_habit(rest) is None:
            return f"No habit with id {rest!r}"
        store.delete_habit(rest)
        return None
    if cmd == "theme":
        return "🌙 Dark mode" if toggle_dark_mode() else "☀️ Light mode"
    return __doc__.split("Commands:", 1)[1].rstrip()


async def main():
    """Boot sequence."""
    log.info("habitpulse starting up...")

    notifier = NotificationScheduler()
    store = build_default_store(notifier)

    def on_change(s: HabitStore) -> None:
        # Fires once per notify and once per expiry; expiry leaves ""
        message = s.current_notification()
        if message:
            print(f"» {message}")

    store.subscribe(on_change)
    log.info("Theme: %s", "dark" if get_dark_mode() else "light")
    print(render_active_view(store))

    loop = asyncio.get_running_loop()
    try:
        while True:
            line = await loop.run_in_executor(None, input, "> ")
            output = handle_command(store, line)
            if output is QUIT:
                break
            if output:
                print(output)
    except (EOFError, KeyboardInterrupt):
        pass
    finally:
        notifier.clear()
        log.info("Shutting down...")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
