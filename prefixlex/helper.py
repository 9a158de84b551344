from prefixlex.errors import TokenizeError


def error_message(expression: str, error: TokenizeError) -> str:
    """Render ``expression`` with the failing fragment underlined."""
    marker = "^" * max(len(error.fragment), 1)
    return f"{expression}\n{' ' * error.location}{marker} {error.message}\n"
