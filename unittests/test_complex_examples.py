import asyncio
from dataclasses import dataclass
from typing import Optional

from ovframework import ErrorInfo, PropertyBinding, ValidationResult, ValidatorSettings, substitute, validator_of


class TestComplexExamples:
    async def test_async_lookup_in_nested_collection(self):
        @dataclass(frozen=True)
        class BankingData:
            contract_id: str
            iban: Optional[str]
            paying_through_sepa: bool

        @dataclass(frozen=True)
        class Customer:
            name: str
            age: int
            banking_data: tuple[BankingData, ...]

        blocked_ibans = frozenset({"DE89370400440532013001"})

        async def iban_not_blocked(binding: PropertyBinding) -> Optional[ErrorInfo]:
            await asyncio.sleep(0)  # e.g. a request to an external service
            if binding.value in blocked_ibans:
                return binding.create_error_info("blocked_iban_error")
            return None

        def iban_required_for_sepa(binding: PropertyBinding) -> Optional[ErrorInfo]:
            if binding.object.paying_through_sepa and binding.value is None:
                return binding.create_error_info(
                    "sepa_iban_error", lambda text: substitute(text, ("ContractId", binding.object.contract_id))
                )
            return None

        def iban_syntax(binding: PropertyBinding) -> Optional[ErrorInfo]:
            iban = binding.value
            if iban is not None and (not iban[:2].isalpha() or not iban[2:].isnumeric()):
                return binding.create_error_info("iban_syntax_error")
            return None

        settings = ValidatorSettings(
            resources=ValidatorSettings().resources.with_messages(
                "en",
                sepa_iban_error="'{PropertyName}' is required for SEPA payers (contract {ContractId}).",
                iban_syntax_error="'{PropertyName}' is not a valid IBAN.",
                blocked_iban_error="'{PropertyName}' is blocked.",
            )
        )
        customer = Customer(
            name="John Doe",
            age=42,
            banking_data=(
                BankingData("contract_1", "DE52940594210000082271", True),
                BankingData("contract_2", "DEA9370400440532013000", True),
                BankingData("contract_3", "DE89370400440532013001", False),
                BankingData("contract_4", None, True),
                BankingData("contract_5", None, False),
            ),
        )
        validator = validator_of(customer, settings=settings)
        validator.rule_for("name").not_empty().length(1, 100)
        validator.rule_for("age").not_empty()
        for banking_validator in validator.rule_for("banking_data").validators_for():
            banking_validator.rule_for("iban", "IBAN").add(iban_required_for_sepa).add(iban_syntax).add(
                iban_not_blocked
            )

        result = ValidationResult(await validator.validate())
        assert result.messages() == {
            "banking_data[1].iban": "'IBAN' is not a valid IBAN.",
            "banking_data[2].iban": "'IBAN' is blocked.",
            "banking_data[3].iban": "'IBAN' is required for SEPA payers (contract contract_4).",
        }
        assert result.num_errors_per_code == {"blocked_iban_error": 1, "iban_syntax_error": 1, "sepa_iban_error": 1}

    async def test_placeholders_from_sibling_properties(self):
        @dataclass
        class Mail:
            subject: str
            body: str

        settings = ValidatorSettings(
            resources=ValidatorSettings().resources.with_messages(
                "en", duplicate_error="'{PropertyName}' must differ: '{Subject}' vs. '{Body}'."
            )
        )
        validator = validator_of(Mail(subject="Hi {Body}", body="Hi {Body}"), settings=settings)
        validator.rule_for("subject").add(
            lambda binding: binding.create_error_info(
                "duplicate_error",
                lambda text: substitute(text, ("Subject", binding.value), ("Body", binding.object.body)),
            )
            if binding.value == binding.object.body
            else None
        )
        (error_info,) = await validator.validate()
        assert error_info.message == "'subject' must differ: 'Hi {Body}' vs. 'Hi {Body}'."
