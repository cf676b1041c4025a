"""Presence Report package.

Turns the away/online transitions of support agents into attendance
analytics. Organized by feature modules (summary, shifts, daily, ...) with
pure aggregation engines, a repository layer for the event source and a thin
Flask controller on top.
"""
