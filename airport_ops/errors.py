from typing import Dict


class ValidationError(Exception):
    """Bad input or a broken uniqueness rule, keyed by wire field name."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(self.summary())

    def summary(self) -> str:
        return "; ".join(f"{field}: {problem}" for field, problem in self.errors.items())


def format_request_errors(errors) -> str:
    # errors as returned by RequestValidationError.errors()
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
