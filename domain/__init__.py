"""Domain layer: entities, value objects and ports. No framework imports."""
