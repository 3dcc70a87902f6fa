def mask_identifier(value: object, prefix: int = 2, suffix: int = 2) -> str:
    text = str(value).strip()
    if not text:
        return ""
    if len(text) <= prefix + suffix:
        return "*" * len(text)
    return f"{text[:prefix]}***{text[-suffix:]}"


def safe_identifier(value: object, mask_sensitive_ids: bool) -> str:
    if not mask_sensitive_ids:
        return str(value)
    return mask_identifier(value, prefix=4, suffix=4)
