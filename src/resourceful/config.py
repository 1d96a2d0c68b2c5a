"""Builder configuration.

CrudConfig is a frozen dataclass, immutable after creation and shared by
every ``crud()`` call made through one bound builder.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CrudConfig:
    """Where generated routes point their view files.

    All fields have sensible defaults. Override what you need::

        config = CrudConfig(base="./app/views", extension=".jsx")
    """

    base: str = "./views"
    extension: str = ".tsx"

    def view(self, name: str, view: str) -> str:
        """Return the file reference for *view* of resource directory *name*."""
        return f"{self.base}/{name}/{view}{self.extension}"


DEFAULT_CONFIG = CrudConfig()
