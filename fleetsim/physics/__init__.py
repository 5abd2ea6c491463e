"""Пакет физики (деградация, тепловой баланс, шаг машины)."""

from __future__ import annotations

from .engine import PhysicsEngine, clamp

__all__ = [
    "PhysicsEngine",
    "clamp",
]
