"""Infrastructure providers.

Production implementations are imported here so they are registered as
subclasses of their component base before the container is built.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
