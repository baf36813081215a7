from __future__ import annotations


class ChartError(ValueError):
    pass


class EmptySampleSet(ChartError):
    def __init__(self) -> None:
        super().__init__("A scatter chart needs at least one sample.")


class MissingStyle(ChartError):
    def __init__(self, label, detail: str = "has no style") -> None:
        self.label = label
        super().__init__(f"Sample label {label!r} {detail}.")


class DegenerateBounds(ChartError):
    pass


class InvalidOptions(ChartError):
    pass
