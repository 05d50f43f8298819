"""Product catalog use cases"""

import logging
from typing import List, Optional
from src.app.repositories.entity_repository import ProductRepository
from src.domain.product import Product
from .dtos import SaveProductCommandDTO

logger = logging.getLogger(__name__)


class SaveProduct:
    """Use Case: Create or update a catalog product"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, command: SaveProductCommandDTO) -> Optional[Product]:
        product = await self.product_repo.save(Product(**command.model_dump(exclude_none=True)))
        if product is None:
            logger.error(f"Failed to save product {command.name}")
            return None
        logger.info(f"Saved product {product.id} ({product.name}) at {product.price}")
        return product


class GetProduct:
    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, product_id: str) -> Optional[Product]:
        return await self.product_repo.get(product_id)


class ListProducts:
    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self) -> List[Product]:
        return await self.product_repo.list_all()


class DeleteProduct:
    """
    Use Case: Delete a catalog product

    Invoice items copied from the product are not affected.
    """

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, product_id: str) -> bool:
        deleted = await self.product_repo.delete(product_id)
        if not deleted:
            logger.error(f"Failed to delete product {product_id}")
        return deleted
