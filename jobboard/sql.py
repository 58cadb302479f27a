"""
Helpers for building parameterized SQL fragments.

Placeholders are positional (``$1``, ``$2``, ...). The n-th placeholder in a
statement always refers to the n-th entry of the parameter list handed to
the store.
"""

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .errors import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    field_to_column: Mapping[str, str],
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause of an UPDATE statement.

    Args:
        data_to_update: Field name -> new value, in the order to emit
        field_to_column: Field name -> column name, for fields whose column differs

    Returns:
        Tuple of (set_cols, values)

    Raises:
        BadRequestError: If data_to_update is empty

    Example:
        sql_for_partial_update({"firstName": "Aliya", "age": 32},
                               {"firstName": "first_name"})
        => ('"first_name"=$1, "age"=$2', ["Aliya", 32])
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    cols = [
        f'"{field_to_column.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    ]
    values = [data_to_update[key] for key in keys]

    return ", ".join(cols), values


class WhereClause:
    """
    Accumulates WHERE predicates together with their bound parameters.

    Each predicate fragment marks its parameter slots with ``{}``; the
    builder fills them with the next free ``$n`` so that placeholder
    positions and the parameter list never drift apart.

    Example:
        where = WhereClause()
        where.add_predicate("salary >= {}", 50000)
        where.add_predicate("equity > 0")
        where.add_predicate("title ILIKE {}", "%dev%")
        where.sql     => " WHERE salary >= $1 AND equity > 0 AND title ILIKE $2"
        where.values  => [50000, "%dev%"]
    """

    def __init__(self, values: Optional[Sequence[Any]] = None):
        """
        Args:
            values: Parameters already bound earlier in the same statement
                (e.g. the values of a SET clause). New placeholders continue
                after them.
        """
        self.values: List[Any] = list(values or [])
        self.predicates: List[str] = []

    def add_predicate(self, fragment: str, *params: Any) -> str:
        slots = fragment.count("{}")
        if slots != len(params):
            raise ValueError(
                f"Predicate {fragment!r} has {slots} slot(s) "
                f"but {len(params)} parameter(s) were given"
            )

        placeholders = []
        for param in params:
            self.values.append(param)
            placeholders.append(f"${len(self.values)}")

        predicate = fragment.format(*placeholders)
        self.predicates.append(predicate)
        return predicate

    @property
    def sql(self) -> str:
        if not self.predicates:
            return ""
        return " WHERE " + " AND ".join(self.predicates)

    def __len__(self) -> int:
        return len(self.predicates)
