"""Workforce Records package.

Three record stores (time entries, shift schedules, leave requests) plus the
payroll and date-window logic built on them. Each feature module follows the
same model / repository / service / controller split, and `container.py`
wires them together.
"""
