"""Interactive runtime: state, controller, terminal, config, and event loop.

``run_app`` is imported lazily so that ``lazyrm.render`` can depend on
``lazyrm.runtime.state`` without import cycles.
"""

from __future__ import annotations


def run_app(*args, **kwargs):
    """Lazily import the runtime bootstrap and run the app."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


__all__ = ["run_app"]
