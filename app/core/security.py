def redact_secret(secret: str | None, visible: int = 6) -> str:
    """
    Redact an API key or other secret for logging purposes.
    Shows the first `visible` characters followed by ***. Secrets too short to
    keep anything hidden are fully masked.
    """
    if not secret:
        return "None"
    if len(secret) <= visible * 2:
        return "***"
    return f"{secret[:visible]}***"
