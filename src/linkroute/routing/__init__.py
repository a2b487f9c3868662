"""Routing — match decomposed URLs against route patterns.

Definitions are immutable; routers keep them in dispatch order and call
each one's handler until one accepts.
"""
