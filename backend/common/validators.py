"""
Centralized validators for the back office.
Includes validators for display colors and catalog names.
"""
import re
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator


# ============================
# Color Validator
# ============================

HEX_COLOR_PATTERN = r'^#[0-9A-Fa-f]{6}$'

hex_color_regex = RegexValidator(
    regex=HEX_COLOR_PATTERN,
    message="Color must be a hexadecimal value (e.g., #32CD32)"
)


def is_hex_color(value) -> bool:
    """Check a color is written as #RRGGBB."""
    return isinstance(value, str) and re.match(HEX_COLOR_PATTERN, value) is not None


def validate_hex_color(value):
    """
    Validates display color format.
    Either case is accepted; callers upper-case the stored value.
    """
    if not is_hex_color(value):
        raise ValidationError(
            "Color must be a hexadecimal value (e.g., #32CD32)"
        )


# ============================
# Generic Name Validator
# ============================

# Characters that would break templates and e-mails when echoed back
FORBIDDEN_NAME_CHARACTERS = '<>={}'


def is_generic_name(value) -> bool:
    """Check a name holds none of the characters reserved by templates."""
    return isinstance(value, str) and not any(char in FORBIDDEN_NAME_CHARACTERS for char in value)

