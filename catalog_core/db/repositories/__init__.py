# catalog_core/db/repositories/__init__.py
from catalog_core.db.repositories.category_repository import CategoryRepository
from catalog_core.db.repositories.store_repository import StoreRepository
from catalog_core.db.repositories.product_repository import ProductRepository
from catalog_core.db.repositories.offer_repository import OfferRepository
from catalog_core.db.repositories.offer_directory import SqlOfferDirectory
