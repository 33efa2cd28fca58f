"""Production adapters implementing application ports."""

__all__: list[str] = []
