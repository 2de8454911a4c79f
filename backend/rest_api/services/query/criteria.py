"""
Filter criteria: one declarative comparison against a single field.

Wire format (the ``filters`` query parameter is a JSON array of these):

    [{"PropertyName": "amount", "Operator": "GreaterThan", "Value": "10"}]

Keys are accepted in PascalCase, camelCase or snake_case. Numeric and
boolean JSON values are carried as strings and converted to the field
type by the filter engine.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from shared.utils.exceptions import ValidationError
from shared.utils.validators import normalize_field_name


class FilterOperator(str, Enum):
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    CONTAINS = "Contains"
    STARTS_WITH = "StartsWith"
    ENDS_WITH = "EndsWith"

    @classmethod
    def parse(cls, token: "str | FilterOperator") -> "FilterOperator":
        """
        Resolve an operator token, case-insensitively.

        Accepts the full names plus the short forms eq/ne/gt/gte/lt/lte.

        Raises:
            ValidationError: Token is not a supported operator
        """
        if isinstance(token, cls):
            return token
        operator = _OPERATOR_TOKENS.get(normalize_field_name(token or ""))
        if operator is None:
            raise ValidationError(f"Unsupported filter operator '{token}'", operator=token)
        return operator

    @property
    def is_ordering(self) -> bool:
        return self in _ORDERING_OPERATORS

    @property
    def is_text(self) -> bool:
        return self in _TEXT_OPERATORS


_ORDERING_OPERATORS = frozenset({
    FilterOperator.GREATER_THAN,
    FilterOperator.GREATER_THAN_OR_EQUAL,
    FilterOperator.LESS_THAN,
    FilterOperator.LESS_THAN_OR_EQUAL,
})

_TEXT_OPERATORS = frozenset({
    FilterOperator.CONTAINS,
    FilterOperator.STARTS_WITH,
    FilterOperator.ENDS_WITH,
})

_OPERATOR_TOKENS: dict[str, FilterOperator] = {
    **{normalize_field_name(op.value): op for op in FilterOperator},
    "eq": FilterOperator.EQUAL,
    "ne": FilterOperator.NOT_EQUAL,
    "gt": FilterOperator.GREATER_THAN,
    "gte": FilterOperator.GREATER_THAN_OR_EQUAL,
    "lt": FilterOperator.LESS_THAN,
    "lte": FilterOperator.LESS_THAN_OR_EQUAL,
}


class FilterCriteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    property_name: str = Field(
        validation_alias=AliasChoices("PropertyName", "propertyName", "property_name"),
    )
    operator: str = Field(
        default=FilterOperator.EQUAL.value,
        validation_alias=AliasChoices("Operator", "operator"),
    )
    value: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Value", "value"),
    )

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_scalars(cls, v):
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v


_criteria_list = TypeAdapter(list[FilterCriteria])


def parse_filters(raw: str | None) -> list[FilterCriteria]:
    """
    Parse the ``filters`` query parameter.

    Returns an empty list for a missing or blank parameter.

    Raises:
        ValidationError: Not a JSON array of filter criteria
    """
    if raw is None or not raw.strip():
        return []
    try:
        return _criteria_list.validate_json(raw)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid filters: expected a JSON array of "
            "{PropertyName, Operator, Value} objects",
            errors=e.error_count(),
        ) from e
