"""Domain layer: models, exceptions, collaborator interfaces and the analysis engine."""
