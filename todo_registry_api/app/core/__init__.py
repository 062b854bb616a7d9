"""
Core building blocks: settings, logging setup, the Ok/Err result type
and the readers-writer lock guarding the registry.
"""
