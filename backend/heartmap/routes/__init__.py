# Routes package init
"""
HeartMap Backend — API Routes Package
======================================

Route Inventory:
    - hearts.py:  POST /api/hearts   (create a marker)
                  GET  /api/hearts   (list markers, newest first)
    - health.py:  GET  /health       (service health check)

Routes are thin: they resolve dependencies and call HeartService.
"""
