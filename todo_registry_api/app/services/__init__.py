"""
Service layer abstraction.

``registry`` holds the todo collection and its five operations;
``dispatcher`` routes named query/update calls to it.  API handlers
only talk to these two classes, never to the underlying mapping.
"""
