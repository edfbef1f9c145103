from app.core.species import DEFAULT_SPECIES, SpeciesCatalog


def get_species_catalog() -> SpeciesCatalog:
    """Species table shared by all endpoints; override in tests via ``dependency_overrides``."""
    return DEFAULT_SPECIES
