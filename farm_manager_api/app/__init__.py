"""
Application package initializer.

The project is organised around one generic entity service.  Each
domain entity (farmers, farms, crops, tasks, subtasks, transactions,
weather) is described by configuration data in ``services.entities``
and bound to a storage backend from ``storage``.  Routers for the
HTTP surface live in ``api/v1/endpoints``.
"""
