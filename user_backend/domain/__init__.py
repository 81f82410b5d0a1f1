"""Domain layer: user entity, field rules, errors and the repository contract."""
