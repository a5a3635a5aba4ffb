"""Domain models for records-desk."""
