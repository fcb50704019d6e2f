"""External collaborators and the translation pipeline."""
