"""promptguide data models.

- PropertyRecord: One configurable attribute of a component
- ComponentRecord: One documented UI component
- Catalog: Ordered collection of components
"""

from promptguide.models.catalog import Catalog, ComponentRecord, PropertyRecord

__all__ = [
    "Catalog",
    "ComponentRecord",
    "PropertyRecord",
]
