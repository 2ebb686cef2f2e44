"""
Service layer abstraction.

``todo_service`` defines the store interface and its errors; the
in‑memory and MongoDB implementations live in ``memory_service`` and
``mongo_service``.  API handlers only depend on the interface, so
either store can be plugged into the application.
"""
