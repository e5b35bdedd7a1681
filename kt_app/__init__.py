"""Host-facing services: project snapshots, keys and the document transmittal."""
