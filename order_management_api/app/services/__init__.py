"""
Service layer.

The record lifecycle is implemented once and configured per entity:
``entities`` declares each entity, ``validator`` checks input against
its schema, ``entity_store`` persists it and ``resource_service``
orchestrates the five operations for the API layer.
"""
