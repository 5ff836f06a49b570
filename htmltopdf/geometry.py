# Purpose: Page geometry in points (1/72 inch) and the A4 preset.


from __future__ import annotations
from dataclasses import dataclass

A4_WIDTH_PT = 595.22
A4_HEIGHT_PT = 841.85
POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4


class InvalidPageConfiguration(ValueError):
    """Raised when margins leave no positive printable area."""


@dataclass(frozen=True)
class Insets:
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


# Negative on purpose: the A4 preset prints past the nominal page box to the edge.
A4_MARGINS = Insets(top=-36, left=-36, bottom=-36, right=-36)


@dataclass(frozen=True)
class PageConfiguration:
    """Printable rectangle in points plus the nominal page it was cut from."""

    x: float
    y: float
    width: float
    height: float
    page_width: float
    page_height: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise InvalidPageConfiguration(
                f"printable area must be positive, got {self.width:g} x {self.height:g} pt"
            )

    @classmethod
    def from_page(cls, page_width: float, page_height: float, margins: Insets) -> "PageConfiguration":
        return cls(
            x=margins.left,
            y=margins.top,
            width=page_width - margins.left - margins.right,
            height=page_height - margins.top - margins.bottom,
            page_width=page_width,
            page_height=page_height,
        )

    @property
    def margins(self) -> Insets:
        return Insets(
            top=self.y,
            left=self.x,
            bottom=self.page_height - self.y - self.height,
            right=self.page_width - self.x - self.width,
        )


def a4_page_configuration(margins: Insets = A4_MARGINS) -> PageConfiguration:
    return PageConfiguration.from_page(A4_WIDTH_PT, A4_HEIGHT_PT, margins)


def points_to_mm(value: float) -> float:
    return value * MM_PER_INCH / POINTS_PER_INCH


A4 = a4_page_configuration()


__all__ = [
    "A4",
    "A4_HEIGHT_PT",
    "A4_MARGINS",
    "A4_WIDTH_PT",
    "Insets",
    "InvalidPageConfiguration",
    "PageConfiguration",
    "a4_page_configuration",
    "points_to_mm",
]
