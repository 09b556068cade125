from typing import Any, Dict
from graphql import GraphQLSchema, introspection_from_schema


def build_introspection(schema: GraphQLSchema) -> Dict[str, Any]:
    # Raises TypeError for an invalid schema; callers let it propagate.
    return introspection_from_schema(
        schema,
        descriptions=True,
        specified_by_url=True,
        directive_is_repeatable=True,
        schema_description=True,
        input_value_deprecation=True,
    )
