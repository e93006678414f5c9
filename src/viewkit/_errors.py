"""viewkit error hierarchy.

All viewkit-specific errors inherit from ViewKitError for easy catching.
"""


class ViewKitError(Exception):
    """Base error for all viewkit operations."""


class ConfigError(ViewKitError):
    """Invalid or missing configuration."""


class TemplateRegistrationError(ViewKitError):
    """A view template could not be compiled during registration.

    Raised at startup so that an application never serves an unparseable
    template.  Callers decide whether to abort or exit.
    """

    def __init__(self, view_name: str, message: str) -> None:
        super().__init__(f"View {view_name!r}: {message}")
        self.view_name = view_name


class RegistryFrozenError(ViewKitError):
    """Registration was attempted after the registry was put in service."""
