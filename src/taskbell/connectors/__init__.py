"""Front-end connectors that call into the task store."""
