"""websecure codegen: application module generation."""

from websecure.codegen.generator import FRAMEWORK_TEMPLATES, generate_middleware_code

__all__ = ["FRAMEWORK_TEMPLATES", "generate_middleware_code"]
