from __future__ import annotations

INVALID_INPUT = "INVALID_INPUT"
ZERO_DIVISION = "ZERO_DIVISION"
OUT_OF_RANGE = "OUT_OF_RANGE"

ERROR_KINDS = (INVALID_INPUT, ZERO_DIVISION, OUT_OF_RANGE)


class CalculationError(ValueError):
    def __init__(self, kind: str, message: str) -> None:
        if kind not in ERROR_KINDS:
            raise ValueError(f"Unknown calculation error kind: {kind}")
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"CalculationError(kind={self.kind!r}, message={self.message!r})"
