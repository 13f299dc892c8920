# Routes package init
"""
Promptopia Backend — API Routes Package
=========================================

Route Inventory:
    - users.py:   GET /api/users/{id}/posts   (prompts created by a user)
    - health.py:  GET /health                 (service health check)

Routes stay thin: they extract path parameters and call a service.
Error responses come from the global handlers in main.py.
"""
