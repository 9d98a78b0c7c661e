"""View modules for manual routing.

The page shell in `app.py` picks one of these views per run. Each view exposes
`view(shell, client)` and returns either `None` or a typed event
(`SubmissionSucceeded`, `UsersFetched`) that the shell applies to its own state.

Add any new view as a module with a `view()` callable and register it in
`TAB_REGISTRY` inside `app.py`.
"""
