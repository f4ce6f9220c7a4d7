"""Work order timeline board: timescale engine, overlap checks and storage."""
