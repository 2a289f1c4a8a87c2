"""Tests that the concrete collaborators satisfy the service contracts."""

from io import StringIO

from pkgexpress.domain.pricing import ShippingCostCalculator
from pkgexpress.domain.rules import ShippingRulesValidator
from pkgexpress.output.console import create_console
from pkgexpress.output.display import ConsoleDisplay
from pkgexpress.prompting import ConsoleInput
from pkgexpress.services.contracts import Calculator, Display, NumberInput, Validator
from tests.conftest import RecordingDisplay, ScriptedInput


class TestConcreteImplementations:
    def test_console_display(self) -> None:
        assert isinstance(ConsoleDisplay(create_console(file=StringIO())), Display)

    def test_console_input(self) -> None:
        assert isinstance(ConsoleInput(), NumberInput)

    def test_validator(self) -> None:
        assert isinstance(ShippingRulesValidator(), Validator)

    def test_calculator(self) -> None:
        assert isinstance(ShippingCostCalculator(), Calculator)


class TestDoubles:
    def test_test_doubles_conform(self) -> None:
        assert isinstance(RecordingDisplay(), Display)
        assert isinstance(ScriptedInput([]), NumberInput)

    def test_mismatched_object_rejected(self) -> None:
        assert not isinstance(ShippingCostCalculator(), Validator)
        assert not isinstance(object(), Display)
