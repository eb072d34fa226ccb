"""Statement builders for partial updates and filtered listings.

Both builders emit positional placeholders (`$1`, `$2`, ...) together with
the ordered list of values that bind them.

Column names passed to these helpers are quoted or embedded as-is and never
escaped. They must come from fixed, caller-controlled mappings, never from
user input.
"""

from typing import Any, List, Mapping, NamedTuple, Optional, Tuple

from jobly.core.exceptions import EmptyUpdateError


class PartialUpdate(NamedTuple):
    """SET clause and its values for a single-row UPDATE."""

    set_cols: str
    values: List[Any]

    @property
    def next_param(self) -> str:
        """Placeholder for the parameter the caller appends after the values."""
        return f"${len(self.values) + 1}"


class FilteredQuery(NamedTuple):
    """Complete statement text plus positional values."""

    text: str
    values: List[Any]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None
) -> PartialUpdate:
    """Build the SET clause of a partial UPDATE.

    Args:
        data_to_update: Logical field names to new values. Iteration order
            decides the parameter numbering.
        js_to_sql: Optional mapping from logical field names to column names.
            Fields without an entry use their logical name as the column.

    Returns:
        PartialUpdate whose `set_cols` holds one `"<column>"=$<n>` fragment per
        field and whose `values` line up with the fragments

    Raises:
        EmptyUpdateError: If `data_to_update` has no fields

    Examples:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    if not data_to_update:
        raise EmptyUpdateError()

    js_to_sql = js_to_sql or {}

    cols = []
    values = []
    for idx, (key, value) in enumerate(data_to_update.items(), start=1):
        column = js_to_sql[key] if key in js_to_sql else key
        cols.append(f'"{column}"=${idx}')
        values.append(value)

    return PartialUpdate(set_cols=", ".join(cols), values=values)


class _Unbound:
    def __repr__(self) -> str:
        return "UNBOUND"


# Marks a predicate that embeds its operand literally
UNBOUND = _Unbound()


class WhereClause:
    """Ordered list of AND-ed predicates with their bound values.

    Predicates are templates containing `{param}` where the placeholder of
    their value goes. Numbering happens in `render`, so the placeholder
    indices always follow the order in which predicates were added.
    """

    def __init__(self):
        self._conditions: List[Tuple[str, Any]] = []

    def __len__(self) -> int:
        return len(self._conditions)

    def add(self, predicate: str, value: Any = UNBOUND) -> "WhereClause":
        """Append a predicate, bound to `value` unless it is UNBOUND.

        Raises:
            ValueError: If a bound predicate lacks `{param}`, or an unbound
                one contains it
        """
        has_param = "{param}" in predicate
        if value is UNBOUND and has_param:
            raise ValueError(f"Predicate has a placeholder but no value: {predicate}")
        if value is not UNBOUND and not has_param:
            raise ValueError(f"Predicate has a value but no placeholder: {predicate}")

        self._conditions.append((predicate, value))
        return self

    def add_substring(self, column: str, text: str) -> "WhereClause":
        """Append a case-insensitive "contains `text`" predicate on `column`."""
        return self.add(f"LOWER({column}) LIKE {{param}}", f"%{text.lower()}%")

    def render(self) -> Tuple[str, List[Any]]:
        """
        Returns:
            Tuple of (clause, values) where clause is " WHERE ..." or an
            empty string when no predicate was added
        """
        predicates = []
        values = []

        for predicate, value in self._conditions:
            if value is UNBOUND:
                predicates.append(predicate)
            else:
                values.append(value)
                predicates.append(predicate.format(param=f"${len(values)}"))

        if not predicates:
            return "", values

        return " WHERE " + " AND ".join(predicates), values
