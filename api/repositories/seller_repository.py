"""Repository for seller operations."""

from models import Seller
from repositories.base import CrudRepository


class SellerRepository(CrudRepository[Seller]):
    model = Seller
    resource = "seller"
    unique_field = "cid"
