"""Tests for the catalog application service."""

import pytest

from patterncatalog.application.decorators import (
    demonstration,
    get_demonstration,
    get_demonstration_names,
)
from patterncatalog.application.dto.responses import DemoResult, PatternCategory
from patterncatalog.application.service import CatalogService, DemonstrationNotFoundError
from patterncatalog.config.schemas import AppConfig, DownloadConfig, TaxConfig
from patterncatalog.domain.base.exceptions import ValidationError

EXPECTED_DEMONSTRATIONS = {
    "abstract_factory", "adapter", "bridge", "builder", "chain_of_responsibility",
    "command", "composite", "decorator", "factory_method", "iterator", "mediator",
    "memento", "observer", "prototype", "proxy", "singleton", "state", "strategy",
    "template_method", "visitor",
}


class TestCatalogService:
    def setup_method(self):
        self.service = CatalogService(AppConfig())

    def test_every_pattern_is_registered(self):
        names = {info.name for info in self.service.list_demonstrations()}

        assert EXPECTED_DEMONSTRATIONS <= names

    def test_listing_is_sorted_by_category_then_name(self):
        infos = self.service.list_demonstrations()
        keys = [(info.category.value, info.name) for info in infos]

        assert keys == sorted(keys)

    def test_filter_by_category(self):
        infos = self.service.list_demonstrations("creational")

        assert {info.name for info in infos} == {
            "abstract_factory", "builder", "factory_method", "prototype", "singleton",
        }
        assert all(info.category == PatternCategory.CREATIONAL for info in infos)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            self.service.list_demonstrations("functional")

    def test_run_returns_transcript(self):
        result = self.service.run("strategy")

        assert isinstance(result, DemoResult)
        assert result.category == PatternCategory.BEHAVIORAL
        assert result.lines == [
            "Sum even numbers 20",
            "Sum odd numbers 16",
            "Sum all numbers 36",
        ]

    def test_run_unknown_name(self):
        with pytest.raises(DemonstrationNotFoundError) as exc_info:
            self.service.run("flyweight")

        assert exc_info.value.entity_id == "flyweight"

    @pytest.mark.parametrize("name", sorted(EXPECTED_DEMONSTRATIONS))
    def test_every_demonstration_runs(self, name):
        result = self.service.run(name)

        assert result.name == name
        assert result.lines

    def test_run_checks_category(self):
        result = self.service.run("observer", "behavioral")

        assert result.name == "observer"

    def test_run_rejects_other_category(self):
        with pytest.raises(ValidationError) as exc_info:
            self.service.run("observer", "structural")

        assert exc_info.value.details == {"name": "observer", "category": "structural"}

    def test_stream_writes_into_given_output(self, transcript):
        info = self.service.stream("state", transcript)

        assert info.name == "state"
        assert transcript.lines == [
            "Call fetch to update state",
            "Loading, please be patient",
            "Show: Done",
        ]

    def test_stream_rejects_other_category(self, transcript):
        with pytest.raises(ValidationError):
            self.service.stream("state", transcript, PatternCategory.CREATIONAL)

        assert transcript.lines == []

    def test_run_all_in_listing_order(self):
        results = self.service.run_all("structural")

        assert [r.name for r in results] == ["adapter", "bridge", "composite", "decorator", "proxy"]

    def test_results_serialize_to_plain_dicts(self):
        data = self.service.run("singleton").to_dict()

        assert data == {"name": "singleton", "category": "creational", "lines": ["1", "2"]}


class TestDemonstrationTranscripts:
    def test_memento_transcript(self):
        assert CatalogService().run("memento").lines == [
            "Current State: State #3",
            "Second State: State #2",
            "Third State: initial state",
            "Last State: State #2",
        ]

    def test_chain_transcript_ends_with_result(self):
        lines = CatalogService().run("chain_of_responsibility").lines

        assert lines[-2] == "I am Button, Let me handle the event"
        assert lines[-1] == "Event handled: True"

    def test_visitor_uses_configured_tax(self):
        config = AppConfig(tax=TaxConfig(necessity=0.0, tobacco=0.0))

        lines = CatalogService(config).run("visitor").lines

        assert lines == ["Daily necessity: 2.5", "Tobacco product: 12.0"]

    def test_template_uses_configured_step(self):
        config = AppConfig(download=DownloadConfig(step_percent=50))

        lines = CatalogService(config).run("template_method").lines

        assert lines == [
            "Start download https://video",
            "Downloading..... 50%",
            "Downloading..... 100%",
            "https://video done",
        ]

    def test_decorator_round_trips(self):
        lines = CatalogService().run("decorator").lines

        assert "Got decrypted data: Important info" in lines
        assert "Got decompressed data: Important info" in lines


class TestDemonstrationDecorator:
    def test_duplicate_name_rejected(self):
        with pytest.raises(ValueError):
            demonstration("observer", PatternCategory.BEHAVIORAL)(lambda context: None)

    def test_registration_lookup(self):
        registration = get_demonstration("bridge")

        assert registration.info.category == PatternCategory.STRUCTURAL
        assert "bridge" in get_demonstration_names()

    def test_unknown_lookup_raises_key_error(self):
        with pytest.raises(KeyError):
            get_demonstration("flyweight")


class TestDemonstrationsWriteTheirTranscript:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("state", ["Call fetch to update state", "Loading, please be patient", "Show: Done"]),
            ("observer", [
                "Email receiver got report: Cloudy, Temperature: 23 degrees",
                "TV station got report: Cloudy, Temperature: 23 degrees",
            ]),
            ("factory_method", ["Deliver by truck"]),
        ],
    )
    def test_lines_are_captured(self, name, expected):
        assert CatalogService().run(name).lines == expected
