from ovframework import ErrorInfo, ValidationResult, validator_of

from .models import Attachment, Message


class TestValidationResult:
    async def test_analysis(self):
        message = Message(subject="", attachments=[Attachment(), Attachment("a.txt"), Attachment()])
        validator = validator_of(message)
        validator.rule_for("subject").not_empty()
        validator.rule_for("body").not_null()
        for attachment_validator in validator.rule_for("attachments").validators_for():
            attachment_validator.rule_for("file_name").not_empty()
        result = ValidationResult(await validator.validate())
        assert not result
        assert not result.is_valid
        assert len(result) == 4
        assert result.property_paths == ["subject", "body", "attachments[0].file_name", "attachments[2].file_name"]
        assert result.num_errors_per_code == {"notempty_error": 3, "notnull_error": 1}
        assert result.errors_per_path["body"].code == "notnull_error"
        assert result.messages()["attachments[2].file_name"] == "'file_name' should not be empty."

    def test_empty_result(self):
        result = ValidationResult([])
        assert result
        assert result.is_valid
        assert result.num_errors_per_code == {}
        assert result.messages() == {}

    def test_error_info(self):
        error_info = ErrorInfo(
            property_path="attachments[1].file_name",
            display_name="file_name",
            code="notempty_error",
            message="'file_name' should not be empty.",
        )
        assert error_info.to_dict() == {
            "property_path": "attachments[1].file_name",
            "display_name": "file_name",
            "code": "notempty_error",
            "message": "'file_name' should not be empty.",
        }
        assert str(error_info) == "attachments[1].file_name: 'file_name' should not be empty. (notempty_error)"
