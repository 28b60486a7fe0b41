"\"\"\"Dependency injection container for the filtering tools.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .builder import FilterBuilder
from .descriptors import default_registry
from .pipeline import FilterPipeline, RecordLoader, ReportWriter
from .schemas.modification import UNIMOD_MASS_TOLERANCE


class FilterContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    registry = providers.Singleton(default_registry)

    builder = providers.Singleton(
        FilterBuilder,
        registry=registry,
        mass_tolerance=config.mass_tolerance.as_(float),
        validate_filters=config.validate_filters.as_(bool),
    )

    record_loader = providers.Singleton(RecordLoader)
    report_writer = providers.Singleton(ReportWriter)

    pipeline = providers.Factory(
        FilterPipeline,
        loader=record_loader,
        writer=report_writer,
    )


def create_container(*, settings: dict | None = None) -> FilterContainer:
    """Instantiate container with optional overrides."""

    container = FilterContainer()
    values = {
        "mass_tolerance": UNIMOD_MASS_TOLERANCE,
        "validate_filters": True,
    }
    if settings and isinstance(settings, dict):
        values.update(
            {key: settings[key] for key in values if key in settings}
        )
    container.config.from_dict(values)

    return container
