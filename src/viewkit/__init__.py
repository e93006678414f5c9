"""viewkit — named template views served as full pages or fragments.

Declare views (a Kida template plus a per-request data source), then mount
them on a Chirp app behind a single endpoint.  The first load gets the full
page; later requests carrying ``X-Content-Request: true`` get just the
fragment named by ``?view=``.

Quick start::

    import viewkit
    from chirp import App

    viewer = viewkit.new(viewkit.ViewKitConfig(title="Inbox", start_view="messages"))
    viewer.add_view("messages", '{% block body %}{{ count }} new{% endblock %}',
                    lambda request: {"count": 3})

    app = App()
    viewer.inject(app)

Templates under ``templates/`` are discovered at ``inject()``: each file
becomes a view named after the file.  Files whose name contains ``main``
override blocks of the built-in main layout instead.

"""

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "RegistryFrozenError",
    "TemplateRegistrationError",
    "ViewKitConfig",
    "ViewKitError",
    "Viewer",
    "__version__",
    "check",
    "create_app",
    "new",
    "serve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import viewkit`` fast; Chirp and Kida load on first use.
    """
    if name == "ViewKitConfig":
        from viewkit.config import ViewKitConfig

        return ViewKitConfig

    if name in ("Viewer", "new"):
        from viewkit import viewer

        return getattr(viewer, name)

    if name in ("create_app", "check", "serve"):
        from viewkit import app

        return getattr(app, name)

    if name in (
        "ViewKitError",
        "ConfigError",
        "RegistryFrozenError",
        "TemplateRegistrationError",
    ):
        from viewkit import _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
