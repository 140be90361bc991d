import pytest

from typed_accessors.config.errors import ConfigurationError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ConfigurationError.invalid_format,
            ("TYPED_ACCESSORS_DATE_DAYFIRST", "maybe", "a boolean"),
            "TYPED_ACCESSORS_DATE_DAYFIRST has invalid format (received 'maybe'). Expected a boolean",
        ),
        (
            ConfigurationError.invalid_format,
            ("param", "value"),
            "param has invalid format (received 'value')",
        ),
        (
            ConfigurationError.conflicting_values,
            ("A", "B"),
            "A and B cannot both be enabled",
        ),
    ],
)
def test_configuration_error_factories(factory, args, expected):
    err = factory(*args)
    assert isinstance(err, ConfigurationError)
    assert str(err) == expected
