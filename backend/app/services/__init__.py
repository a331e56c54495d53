# Services package init
"""
Commerce Backend — Services Layer
==================================

What:  Data-access and business-rule layer between routes (HTTP) and the database.
How:   One service per entity, each constructed around an AsyncSession.
       Routes receive them through FastAPI dependencies (app/dependencies.py).

Service Inventory:
    - CrudService (generic): create/get/list/update/delete for one model
    - UserService: email uniqueness → ConflictError
    - ProductService: search, atomic stock adjustment
    - OrderService: inventory-aware placement, user/status filters
    - DeliveryService: order/courier reference checks
    - CourierService: plain CRUD
"""
