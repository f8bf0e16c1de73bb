# catalog_core/db/models/__init__.py
from catalog_core.db.models.category import Category
from catalog_core.db.models.store import Store
from catalog_core.db.models.product import Product
from catalog_core.db.models.offer import Offer
