"""Infrastructure layer: adapters from filters to plain predicates."""
