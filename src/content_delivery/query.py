"""Builder for delivery API search ("q") expressions.

Example:
    query = (
        SearchQueryBuilder("Employee")
        .and_field("age", QueryOperator.GREATER_OR_EQUAL, "21")
        .build()
    )
    # 'type eq "Employee" AND fields.age ge "21"'

Field names other than the reserved asset properties (id, name, type,
...) refer to content item fields and are prefixed with "fields.".
"""

from enum import Enum

FIELD_PREFIX = "fields."


class FieldName(Enum):
    """Reserved asset property names, used in queries without a prefix."""

    ID = "id"
    TYPE = "type"
    TYPE_CATEGORY = "typeCategory"
    NAME = "name"
    DESCRIPTION = "description"
    SLUG = "slug"
    TRANSLATABLE = "translatable"
    LANGUAGE = "language"
    STATUS = "status"
    PARENT_ID = "parentId"
    CREATED_BY = "createdBy"
    CREATED_DATE = "createdDate"
    UPDATED_BY = "updatedBy"
    UPDATED_DATE = "updatedDate"
    LINKS = "links"
    REPOSITORY_ID = "repositoryId"
    PUBLISH_INFO = "publishinfo"
    EXTERNAL_FILE = "externalFile"
    CHANNELS = "channels"
    TAXONOMIES = "taxonomies"
    FILE_GROUP = "fileGroup"
    TAXONOMY_CATEGORY_NODES_ID = "taxonomies.categories.nodes.id"
    ALL = "all"

    @classmethod
    def is_reserved(cls, name: str) -> bool:
        return any(field.value == name for field in cls)


class QueryOperator(Enum):
    EQUALS = "eq"
    CONTAINS = "co"
    STARTS_WITH = "sw"
    GREATER_OR_EQUAL = "ge"
    LESS_OR_EQUAL = "le"
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    MATCHES = "mt"
    SIMILAR = "sm"
    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


def query_field_name(field_name: str | None) -> str | None:
    """Prefix a content item field name with "fields." where needed."""
    if (
        field_name is None
        or FieldName.is_reserved(field_name)
        or field_name.startswith(FIELD_PREFIX)
    ):
        return field_name
    return FIELD_PREFIX + field_name


def field_list(fields: str | list[str] | None) -> str | None:
    """Join field names into a comma-separated "fields" or "expand" value.

    A string is read as names already separated by commas.
    """
    if isinstance(fields, str):
        fields = [field.strip() for field in fields.split(",") if field.strip()]
    if not fields:
        return None
    return ",".join(query_field_name(field) for field in fields)


class SearchQueryBuilder:
    """Fluent builder for a search expression.

    Groups left open when build() is called are closed automatically.
    """

    def __init__(self, type_name: str | None = None):
        self._parts: list[str] = []
        self._open_groups = 0
        if type_name is not None:
            self.start_expression(FieldName.TYPE.value, QueryOperator.EQUALS, type_name)

    @staticmethod
    def expression(field: str, operator: QueryOperator | str, value: str) -> str:
        return f'{query_field_name(field)} {operator} "{value}"'

    def _append_clause(self, clause: QueryOperator, expression: str) -> None:
        # no joining clause directly after an opening parenthesis or at the start
        text = "".join(self._parts)
        if text and not text.endswith("("):
            self._parts.append(f" {clause} ")
        self._parts.append(expression)

    def start_expression(
        self,
        field: str,
        operator: QueryOperator | None = None,
        value: str | None = None,
    ) -> "SearchQueryBuilder":
        """Append an expression with no joining clause.

        Called with only a field, the field is treated as a complete
        expression string.
        """
        if operator is None:
            self._parts.append(field)
        else:
            self._parts.append(self.expression(field, operator, value or ""))
        return self

    def add_expression(self, expression: str) -> "SearchQueryBuilder":
        self._append_clause(QueryOperator.AND, expression)
        return self

    def and_field(
        self, field: str, operator: QueryOperator, value: str
    ) -> "SearchQueryBuilder":
        self._append_clause(QueryOperator.AND, self.expression(field, operator, value))
        return self

    def or_field(
        self, field: str, operator: QueryOperator, value: str
    ) -> "SearchQueryBuilder":
        self._append_clause(QueryOperator.OR, self.expression(field, operator, value))
        return self

    def start_group(self, operator: QueryOperator | None = None) -> "SearchQueryBuilder":
        if operator is not None:
            self._parts.append(f" {operator} ")
        self._parts.append("(")
        self._open_groups += 1
        return self

    def end_group(self) -> "SearchQueryBuilder":
        self._parts.append(")")
        self._open_groups -= 1
        return self

    def match_list(
        self, field: str, values: list[str], group: bool = True
    ) -> "SearchQueryBuilder":
        self._parts.append(match_id_list(field, values, group))
        return self

    def build(self) -> str:
        while self._open_groups > 0:
            self.end_group()
        return "".join(self._parts)


def match_id_list(field: str, values: list[str], group: bool = True) -> str:
    """OR together equality tests of one field against several values."""
    if not values:
        return ""
    builder = SearchQueryBuilder()
    builder.start_expression(field, QueryOperator.EQUALS, values[0])
    for value in values[1:]:
        builder.or_field(field, QueryOperator.EQUALS, value)
    expression = builder.build()
    return f"({expression})" if group else expression
