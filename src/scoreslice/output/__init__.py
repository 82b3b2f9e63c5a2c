"""Output layer — turns ServiceResult into Rich text or JSON."""
