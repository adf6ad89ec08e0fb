"""Zone catalog — load, validate, query, and serialize catalog/*.json."""

from .models import (
    Size, Zone, Component,
    ValidationError, CatalogResult, CatalogError, UnknownComponentError,
)
from .loader import load_catalog, CATALOG_DIR
from .zones import ZoneCatalog
from .serialization import catalog_to_dict, component_to_dict, zone_to_dict

__all__ = [
    # Models
    "Size", "Zone", "Component",
    "ValidationError", "CatalogResult", "CatalogError", "UnknownComponentError",
    # Loader
    "load_catalog", "CATALOG_DIR",
    # Lookups
    "ZoneCatalog",
    # Serialization
    "catalog_to_dict", "component_to_dict", "zone_to_dict",
]
