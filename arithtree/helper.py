# below the interpreter's int/str conversion limit, whatever it is set to
CHUNK_DIGITS = 500
CHUNK = 10**CHUNK_DIGITS


def error_message(
    expression: str, location: int, message: str, length: int = 1
) -> str:
    marker = "^" + "~" * max(length - 1, 0)
    messages = [f"{expression}\n", f"{' ' * location}{marker} {message}\n"]
    return "".join(messages)


def digits_to_int(text: str) -> int:
    value = 0
    for start in range(0, len(text), CHUNK_DIGITS):
        chunk = text[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value >= CHUNK:
        value, rest = divmod(value, CHUNK)
        chunks.append(f"{rest:0{CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return sign + "".join(reversed(chunks))
