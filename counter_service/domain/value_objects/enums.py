"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class FailureKind(str, Enum):
    VALIDATION = "validation"
    STORE_OPERATION = "store_operation"
    STORE_CONSISTENCY = "store_consistency"
    UNEXPECTED = "unexpected"


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"
