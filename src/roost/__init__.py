"""Roost — a small ASGI server for single-page applications.

Serves the build output's assets, answers known client routes with the
shell document (the matched route injected as ``window.__INITIAL_ROUTE__``),
and returns 404 for everything else.

Basic usage::

    from roost import App, AppConfig

    app = App(AppConfig(build_dir="dist"), routes=["about", "users/{id}"])
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "RoostError",
    "RouteTable",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from roost.app import App

        return App

    if name == "AppConfig":
        from roost.config import AppConfig

        return AppConfig

    if name == "RouteTable":
        from roost.routing.matcher import RouteTable

        return RouteTable

    if name in ("ConfigurationError", "HTTPError", "NotFound", "RoostError"):
        import roost.errors

        return getattr(roost.errors, name)

    msg = f"module 'roost' has no attribute {name!r}"
    raise AttributeError(msg)
