from typing import Optional


def error_message(expression: str, location: Optional[int], message: str) -> str:
    if location is None:
        return f"{message}\n"
    location = min(location, len(expression))
    messages = [f"{expression}\n", f"{' ' * location}^ {message}\n"]
    return "".join(messages)
