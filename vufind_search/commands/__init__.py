"""
Command pattern implementation for search backends.

Commands bind one operation to one named backend, track whether they have
run and hold the result, so callers can build them in one place, dispatch
them through the CommandDispatcher and read the outcome afterwards.
"""
