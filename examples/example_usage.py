"""Example: use the engine directly (no Flask).

Prints the current month as a text grid, marking vacations with '*'.
"""

import importlib

from config import get_settings_module

from shift_calendar.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={"STORAGE_PATH": getattr(settings, "STORAGE_PATH", None)})
    service = container.schedule_service

    year, month = service.navigate()
    view = service.get_month_view(year, month)

    print(view.title)
    print(" ".join(f"{d:<9}" for d in view.weekdays))
    for row in range(6):
        cells = view.cells[row * 7:(row + 1) * 7]
        print(" ".join(
            f"{c.day.day:>2}{'*' if c.vacation else ' '}{c.display_label[:6]:<6}" for c in cells
        ))


if __name__ == "__main__":
    main()
