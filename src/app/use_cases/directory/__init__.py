"""Client, product and business profile use cases"""
from .clients import SaveClient, GetClient, ListClients, DeleteClient
from .products import SaveProduct, GetProduct, ListProducts, DeleteProduct
from .business import GetBusinessProfile, SaveBusinessProfile
from .dtos import SaveClientCommandDTO, SaveProductCommandDTO

__all__ = [
    "SaveClient",
    "GetClient",
    "ListClients",
    "DeleteClient",
    "SaveProduct",
    "GetProduct",
    "ListProducts",
    "DeleteProduct",
    "GetBusinessProfile",
    "SaveBusinessProfile",
    "SaveClientCommandDTO",
    "SaveProductCommandDTO",
]
