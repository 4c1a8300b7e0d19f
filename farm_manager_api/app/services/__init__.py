"""
Service layer.

``field_mapper`` translates between UI and storage records,
``entity_service`` implements the generic CRUD facade and
``entities`` declares every entity as configuration.  The remaining
modules add entity-specific lookups and the dashboard summaries, and
``registry`` wires one service per entity to the configured backend.
"""
