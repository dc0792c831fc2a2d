"""External Table Models — column contract of the tables the gateway reads.

Invariants:
    - Owned and migrated by the systems of record, not by this service
    - Queries use plain SQL text; the models document columns and seed test schemas
"""

from gateway.models.customer import ExternalCustomer
from gateway.models.part_pricing import PartPricing
from gateway.models.warranty import ExternalWarranty

__all__ = ["ExternalCustomer", "ExternalWarranty", "PartPricing"]
