from catalog_core.schemas.actor import Actor, Role
from catalog_core.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryRecord,
    CategoryNode,
    slugify,
)
from catalog_core.schemas.offer import (
    OfferCreate,
    OfferUpdate,
    OfferDraft,
    OfferRecord,
    OfferState,
    RemainingTime,
)
