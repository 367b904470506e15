STORAGE_SIZE_MODULUS = 1024.0


def format_bytes(number) -> str:
    for unit in ["B", "K", "M", "G", "T"]:
        if number >= STORAGE_SIZE_MODULUS and unit != "T":
            number /= STORAGE_SIZE_MODULUS
            continue

        if unit in {"B", "K"}:
            return f"{int(number)}{unit}"

        return f"{number:.1f}{unit}"

    raise ValueError("This should not happen")


def format_integer(number) -> str:
    return f"{number:,}"


def format_rate(count: int, seconds: float) -> str:
    if seconds <= 0:
        return "inf/s"

    return f"{format_integer(int(count / seconds))}/s"
