"""Core contracts: ports (protocols), error types, application state."""
