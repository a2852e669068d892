"""Tests for resume input validation."""
import pytest

from etl.resume.exceptions import ValidationError
from etl.resume.validation import ResumeInput, validate_resume_input


class TestValidateResumeInput:

    def test_valid_input_defaults_to_txt(self):
        result = validate_resume_input("John Doe\njohn@example.com")

        assert result == ResumeInput(content="John Doe\njohn@example.com", format="txt")

    def test_format_is_normalized(self):
        assert validate_resume_input("John Doe resume", "PDF").format == "pdf"

    @pytest.mark.parametrize("content, message", [
        (None, "No resume content or file provided"),
        ("", "must not be empty"),
        ("     \n\t   ", "must not be empty"),
        ("Short", "at least 10 characters"),
        ("A" * 50001, "too long (max 50,000 characters)"),
    ])
    def test_rejected_content(self, content, message):
        with pytest.raises(ValidationError) as exc_info:
            validate_resume_input(content)

        assert message in str(exc_info.value)
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_length_bounds_are_inclusive(self):
        assert validate_resume_input("A" * 10).content == "A" * 10
        assert validate_resume_input("A" * 50000).content == "A" * 50000

    def test_custom_bounds(self):
        with pytest.raises(ValidationError):
            validate_resume_input("John Doe resume", min_length=20)
        with pytest.raises(ValidationError):
            validate_resume_input("John Doe resume", max_length=5)

    def test_unsupported_format(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_resume_input("John Doe resume", "exe")

        assert "Unsupported resume format" in str(exc_info.value)

    def test_non_string_content(self):
        with pytest.raises(ValidationError):
            validate_resume_input(12345678901)
