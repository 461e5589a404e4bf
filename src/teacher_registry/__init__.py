"""teacher-registry: an in-memory Teacher record store with a console menu."""
