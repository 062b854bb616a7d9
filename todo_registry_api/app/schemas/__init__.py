"""
Pydantic schema definitions for API payloads.

``todo`` holds request bodies and the Ok/Err variant replies of the
five todo operations; ``call`` holds the envelope used by the raw
query/update call endpoints.
"""
