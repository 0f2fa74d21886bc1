"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(settings, JSONL source reading, record field lookup, pagination). Keep
feature-specific rules in the corresponding feature package (e.g. `courses/`).
"""
