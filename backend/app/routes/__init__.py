# Routes package init
"""
Commerce Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory (all entity routes under /api):
    - users.py:       /users, /users/{id}, /users/{id}/orders
    - products.py:    /products, /products/{id}, /products/{id}/stock
    - orders.py:      /orders, /orders/{id}
    - deliveries.py:  /deliveries, /deliveries/{id}
    - couriers.py:    /couriers, /couriers/{id}
    - health.py:      /health

Routes stay thin: they validate input through pydantic, call a service,
and wrap the result in the success envelope. Errors are raised, not
returned, and become envelopes in the global exception handlers.
"""
