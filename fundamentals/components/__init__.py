from .containers import (
    ContainerSpec,
    container_selector,
    synthesize_container,
    synthesize_containers,
)

__all__ = ["ContainerSpec", "container_selector", "synthesize_container", "synthesize_containers"]
