"""
Application Layer

Use cases over the board domain: the work order store, the form-facing
service, read queries for the renderer and the wiring that builds them.
"""
