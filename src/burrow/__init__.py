"""Burrow — convention-based route generation for React Router apps.

Scans a routes directory laid out by naming convention and writes a
TypeScript module exporting the matching ``RouteObject[]``.

Quick start::

    import burrow

    burrow.generate("my-app/")       # write src/generated/routes.tsx once
    burrow.watch("my-app/")          # regenerate on every settled change
    burrow.check("my-app/")          # fail if there are no routes

Conventions::

    routes/_layout.tsx      layout wrapping everything in its directory
    routes/index.tsx        index route
    routes/about.tsx        /about
    routes/users/[id].tsx   /users/:id

"""

__version__ = "0.1.0-dev"
__all__ = [
    "BurrowConfig",
    "__version__",
    "check",
    "generate",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import burrow`` fast; watchfiles is only loaded when needed.
    """
    if name == "BurrowConfig":
        from burrow.config import BurrowConfig

        return BurrowConfig

    if name == "generate":
        from burrow.app import generate

        return generate

    if name == "watch":
        from burrow.app import watch

        return watch

    if name == "check":
        from burrow.app import check

        return check

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
