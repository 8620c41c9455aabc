"""Catalog application service - list and run pattern demonstrations."""
from typing import List, Optional, Union

from patterncatalog.application import demos  # noqa: F401  (registers demonstrations)
from patterncatalog.application.decorators import (
    DemoContext,
    DemonstrationRegistration,
    get_registered_demonstrations,
)
from patterncatalog.application.dto.responses import (
    DemoResult,
    DemonstrationInfo,
    PatternCategory,
)
from patterncatalog.config.schemas import AppConfig
from patterncatalog.domain.base.exceptions import EntityNotFoundError, ValidationError
from patterncatalog.domain.base.ports import OutputPort
from patterncatalog.infrastructure.logging.logger import get_logger
from patterncatalog.infrastructure.output import TranscriptOutput


class DemonstrationNotFoundError(EntityNotFoundError):
    """Raised when a demonstration is not registered."""

    def __init__(self, name: str):
        super().__init__("Demonstration", name)


class CatalogService:
    """Application service for the pattern catalog."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self._logger = get_logger(__name__)

    def list_demonstrations(
        self, category: Optional[Union[PatternCategory, str]] = None
    ) -> List[DemonstrationInfo]:
        """
        List registered demonstrations, sorted by category then name.

        Args:
            category: Only list demonstrations in this category

        Raises:
            ValidationError: If the category is unknown
        """
        wanted = self._parse_category(category) if category is not None else None
        infos = [
            registration.info
            for registration in get_registered_demonstrations().values()
            if wanted is None or registration.info.category == wanted
        ]
        return sorted(infos, key=lambda info: (info.category.value, info.name))

    def run(
        self, name: str, category: Optional[Union[PatternCategory, str]] = None
    ) -> DemoResult:
        """
        Run one demonstration and capture everything it wrote.

        Args:
            name: Demonstration name
            category: When given, the demonstration must belong to this category

        Raises:
            DemonstrationNotFoundError: If no demonstration has this name
            ValidationError: If the demonstration is in another category
        """
        transcript = TranscriptOutput()
        registration = self._execute(name, transcript, category)
        self._logger.debug("Captured transcript", demonstration=name, lines=len(transcript))

        return DemoResult(
            name=registration.info.name,
            category=registration.info.category,
            lines=transcript.lines,
        )

    def stream(
        self,
        name: str,
        output: OutputPort,
        category: Optional[Union[PatternCategory, str]] = None,
    ) -> DemonstrationInfo:
        """Run one demonstration, writing each line to output as it is produced."""
        return self._execute(name, output, category).info

    def run_all(self, category: Optional[Union[PatternCategory, str]] = None) -> List[DemoResult]:
        """Run every demonstration in listing order."""
        return [self.run(info.name) for info in self.list_demonstrations(category)]

    def _execute(
        self,
        name: str,
        output: OutputPort,
        category: Optional[Union[PatternCategory, str]],
    ) -> DemonstrationRegistration:
        registration = get_registered_demonstrations().get(name)
        if registration is None:
            raise DemonstrationNotFoundError(name)

        if category is not None and registration.info.category != self._parse_category(category):
            raise ValidationError(
                f"Demonstration '{name}' is not in category '{category}'",
                details={"name": name, "category": str(category)},
            )

        self._logger.info("Running demonstration", demonstration=name)
        registration.run(DemoContext(output=output, config=self._config))
        self._logger.debug("Demonstration finished", demonstration=name)
        return registration

    @staticmethod
    def _parse_category(category: Union[PatternCategory, str]) -> PatternCategory:
        try:
            return PatternCategory(category)
        except ValueError:
            valid = [c.value for c in PatternCategory]
            raise ValidationError(
                f"Unknown category '{category}'. Must be one of: {valid}",
                details={"category": str(category)},
            ) from None
