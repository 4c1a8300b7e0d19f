"""
Pydantic schema definitions for API payloads.

Schemas describe UI-shaped records: camelCase on the wire (``Id``,
``plantedDate``, ...) and snake_case attributes in Python.  They are
separate from the storage mapping in ``services.entities`` so the API
representation is decoupled from the hosted store's column names.
"""
