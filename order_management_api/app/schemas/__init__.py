"""
Pydantic schema definitions for API payloads.

Each entity (orders, order details, payments, suppliers) defines a
``*Create`` model used to validate incoming bodies and a ``*Read`` model
describing stored records as returned by the API.  Update requests use
the ``*Create`` model as well since updates replace the whole record.
"""
