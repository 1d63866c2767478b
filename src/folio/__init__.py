"""folio - content query tools for a static portfolio and blog site."""

__version__ = "0.3.0"
