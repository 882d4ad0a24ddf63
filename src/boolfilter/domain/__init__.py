"""Domain layer: clause grammar, matcher model, exceptions, ports."""
