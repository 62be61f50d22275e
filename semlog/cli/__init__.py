# semlog/cli/__init__.py
"""
Command line entry points: ``semlog`` (tree, sample) and ``stree``.
"""
