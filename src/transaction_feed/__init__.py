"""Client-side data access for paginated, filterable transaction listings."""

__version__ = "0.1.0"
