"""websecure utilities: input sanitizing, cookie defaults, nonces, name transforms."""

from websecure.utils.cookies import apply_cookie_defaults
from websecure.utils.naming import to_camel_case, to_kebab_case, to_snake_case
from websecure.utils.nonce import generate_nonce, nonce_source
from websecure.utils.sanitize import sanitize_input

__all__ = [
    "apply_cookie_defaults",
    "generate_nonce",
    "nonce_source",
    "sanitize_input",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
]
