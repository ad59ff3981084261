"""
https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__

Pydantic integration for uuid_utils.UUID so booking ids can be used directly
as path parameters and response fields (OpenAPI: type string, format uuid).
"""

from typing import Any
import uuid

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema
from uuid_utils import UUID


class UtilsUUID7(UUID):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls._validate_str),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(UUID),
                    core_schema.no_info_plain_validator_function(cls._validate_stdlib),
                    from_str,
                ]
            ),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'uuid'}

    @staticmethod
    def _validate_str(value: str) -> UUID:
        try:
            return UUID(value)
        except ValueError as e:
            raise PydanticCustomError('uuid_parsing', 'Input should be a valid UUID') from e

    @staticmethod
    def _validate_stdlib(value: Any) -> UUID:
        if isinstance(value, uuid.UUID):
            return UUID(str(value))
        raise PydanticCustomError('uuid_type', 'Input should be a UUID')
