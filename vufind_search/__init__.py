"""
Typed search commands dispatched to pluggable search backends.
"""
