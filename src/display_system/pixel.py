#!/usr/bin/env python3
"""
Pixel class - Library independent color representation

Provides a zero-overhead color class that extends int, with RGB property
access, tuple conversion for pygame and linear blending for glow effects.
"""
from typing import Tuple


class Pixel(int):
    """Custom color class that packs RGB into integer - zero overhead

    Usage:
        pixel = Pixel(255, 0, 0)             # Red
        pixel = Pixel(0xFF0000)              # Red from packed int
        pixel = Pixel.from_tuple((255, 0, 0))
        surface.fill(pixel.as_tuple())       # pygame wants a tuple
        pixel.blend(Pixel(0, 0, 0), 0.5)     # Half-way to black
    """

    def __new__(cls, r: int, g: int = None, b: int = None) -> 'Pixel':
        """Create pixel from RGB values or an existing packed int

        Args:
            r: Red component (0-255) OR packed color integer
            g: Green component (0-255) OR None if r is packed color
            b: Blue component (0-255) OR None if r is packed color
        """
        if g is None and b is None:
            return int.__new__(cls, r)
        elif g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        else:
            # Clamp to 0-255 and pack into 24-bit integer
            r_clamped = max(0, min(255, int(r)))
            g_clamped = max(0, min(255, int(g)))
            b_clamped = max(0, min(255, int(b)))
            return int.__new__(cls, (r_clamped << 16) | (g_clamped << 8) | b_clamped)

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, int, int]) -> 'Pixel':
        r, g, b = rgb
        return cls(r, g, b)

    @property
    def r(self) -> int:
        """Red component (0-255)"""
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        """Green component (0-255)"""
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        """Blue component (0-255)"""
        return self & 0xFF

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def blend(self, other: 'Pixel', amount: float) -> 'Pixel':
        """Linear mix: amount 0.0 gives self, 1.0 gives other"""
        amount = max(0.0, min(1.0, amount))
        return Pixel(
            round(self.r + (other.r - self.r) * amount),
            round(self.g + (other.g - self.g) * amount),
            round(self.b + (other.b - self.b) * amount),
        )

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"
