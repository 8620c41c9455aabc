"""
Application Layer Decorators for demonstrations.

Demonstration functions register themselves with @demonstration; the catalog
service consumes the registry and never imports a demo module by name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from patterncatalog.application.dto.responses import DemonstrationInfo, PatternCategory
from patterncatalog.config.schemas import AppConfig
from patterncatalog.domain.base.ports import OutputPort


@dataclass
class DemoContext:
    """What every demonstration receives: somewhere to write and the settings."""
    output: OutputPort
    config: AppConfig


DemoFunction = Callable[[DemoContext], None]


@dataclass(frozen=True)
class DemonstrationRegistration:
    """Container for demonstration registration information."""
    info: DemonstrationInfo
    run: DemoFunction


# Demonstration registry (application-level abstraction)
_demonstration_registry: Dict[str, DemonstrationRegistration] = {}


def demonstration(name: str, category: Union[PatternCategory, str], summary: str = ""):
    """
    Application-layer decorator to register a demonstration.

    Usage:
        @demonstration("observer", PatternCategory.BEHAVIORAL, "Fan out weather reports")
        def observer_demo(context: DemoContext) -> None:
            ...

    Args:
        name: Unique demonstration name
        category: Pattern category the demonstration belongs to
        summary: One-line description shown in listings

    Returns:
        The decorated function, unchanged

    Raises:
        ValueError: If the name is already registered
    """
    info = DemonstrationInfo(name=name, category=PatternCategory(category), summary=summary)

    def decorator(func: DemoFunction) -> DemoFunction:
        if name in _demonstration_registry:
            raise ValueError(f"Demonstration '{name}' is already registered")
        _demonstration_registry[name] = DemonstrationRegistration(info=info, run=func)

        # Mark the function with metadata for discovery
        func._demonstration_name = name
        return func

    return decorator


def get_registered_demonstrations() -> Dict[str, DemonstrationRegistration]:
    """Get all registered demonstrations."""
    return _demonstration_registry.copy()


def get_demonstration(name: str) -> DemonstrationRegistration:
    """Get the registration for a specific demonstration."""
    if name not in _demonstration_registry:
        raise KeyError(f"No demonstration registered with name: {name}")
    return _demonstration_registry[name]


def get_demonstration_names() -> List[str]:
    return sorted(_demonstration_registry)
