"""
Domain Layer

Business rules of the timeline board, independent of HTTP and storage.

Components:
- board/: Work centers, work orders, calendar arithmetic, the timescale
  engine and the overlap validator
- shared/: Base classes and the domain error hierarchy
"""
