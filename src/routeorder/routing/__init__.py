"""Routing — template compilation, path classification and priority order.

Templates are parsed into segments, compiled into anchored matchers on
first use, and ordered through a shared-prefix tree.
"""
