"""Shift Calendar package.

Renders a rotating two-person 4-on/4-off shift schedule over a month grid and
overlays user-declared vacations. Organized by feature modules (shifts,
vacations, schedules) with a thin Flask controller layer on top of plain
service/store classes.
"""
